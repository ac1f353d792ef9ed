"""Date interval humanization.

The interval layer turns two points in time into a localized string such as "27 years" or
"2 года 3 месяца": normalize inputs, decompose the calendar difference, then pluralize and join
the most significant non-zero units.
"""
