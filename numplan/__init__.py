"""numplan — telephone number recognition against numbering-plan metadata.

Given a digit string and an optional region hint, the analyzer works out
which regions the number belongs to, its national significant number, the
phone-number categories it is valid or possible for, and a display format.

Typical use::

    from numplan.analysis.analyzer import analyze

    result = analyze("2025551234", "US")
"""
