#!/usr/bin/env python3
"""Profile tagtree to find performance bottlenecks."""

import cProfile
import io
import pstats

from tagtree import TagTree

# Sample template: rows with values in a quoted prop, a spread and a child
fragments = ["<table>"]
values = []
for index in range(200):
    fragments[-1] += '\n  <tr class="row '
    values.append("odd" if index % 2 else "even")
    fragments.append('" ...')
    values.append({"data-index": index})
    fragments.append(">\n    <td>")
    values.append(f"Cell {index}")
    fragments.append("</td>\n  </tr>")
fragments[-1] += "\n</table>"

# Profile
pr = cProfile.Profile()
pr.enable()

for _ in range(10):
    result = TagTree(fragments, values)
    _ = result.root

pr.disable()

# Print stats
s = io.StringIO()
ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
ps.print_stats(50)  # Top 50 functions
print(s.getvalue())
