"""Phone number analysis package.

Resolution pipeline, leaves first:

normalizer   — raw digits + region → canonical string
categories   — national number → valid / possible category tags
formats      — national number → display format rule
resolver     — one region: normalize, match, build the entry
detector     — every region: match the raw digits, merge entries
arbiter      — pick the stronger of two candidate results
analyzer     — entry point composing the above (``PhoneAnalyzer``)

Every step is a pure function of its inputs and the read-only metadata
store.  Nothing here raises for bad input: an unrecognised number yields
an empty ``AnalysisResult``.
"""
