"""
Temporal Layer

RESPONSIBILITY: Turn date strings into comparable TimePoints
ALLOWED INPUTS: Raw date strings from the dataset
OUTPUTS: TimePoint, UncertainInterval

WHAT THIS LAYER MUST NOT DO:
============================
- Guess a date for an unparseable string
- Repair inverted bounds
- Know anything about windows, ticks or bars

Modules:
- calendar: proleptic Gregorian day arithmetic without a year 0
- parser:   the single date parser (``parse_date``)
"""
