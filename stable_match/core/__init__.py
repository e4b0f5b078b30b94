"""
Core matching logic for stable-match.

Submodules:
- matching: Candidate trackers and the deferred-acceptance engine
"""
