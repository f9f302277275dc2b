#!/usr/bin/env python3
"""
Quick Start Examples: Simplest possible usage of kmpscan

Builds an automaton once, scans several texts with it, and shows the
restart states the builder folded into the table.
"""
import sys
sys.path.insert(0, "../src")

from kmpscan import InvalidPattern, build, scan, search

print("=" * 80)
print("QUICK START EXAMPLES")
print("=" * 80)

# ============================================================================
# EXAMPLE 1: One pattern, many texts
# ============================================================================
table = build("abab")
for text in ["ababab", "abaababab", "aaaa", ""]:
    offset = scan(table, text)
    shown = "not found" if offset is None else f"offset {offset}"
    print(f"  {text!r:14s} -> {shown}")

# ============================================================================
# EXAMPLE 2: What the builder computed
# ============================================================================
print("\nRestart states for 'ababaca':", build("ababaca").restart_states())
print("Column for 'a' in 'abab':", list(table.dfa[ord("a")]))

# ============================================================================
# EXAMPLE 3: One-shot search and bad input
# ============================================================================
print("\nsearch('needle', 'haystack needle') ->", search("needle", "haystack needle"))
try:
    build("")
except InvalidPattern as exc:
    print(f"build('') raised InvalidPattern: {exc}")
