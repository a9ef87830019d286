"""
Similar-property recommendations.

Responsibilities:
- Score pairs of properties with a weighted multi-factor similarity.
- Explain each match with human-readable reasons.
- Rank and truncate candidates into a top-K list.
"""
