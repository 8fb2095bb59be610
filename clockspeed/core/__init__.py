"""
Core model (FROZEN)

Defines WHAT a decoded blueprint and an adjustment batch are, independent of
codec, pipeline or CLI.

Invariants:
- Entities are borrowed from the codec, never created or destroyed here.
- The only entity mutation is the mCurrentPotential / mPendingPotential pair.
- Clock speeds are multipliers; 1.0 == 100%.

Core explicitly does NOT:
- Perform IO
- Know about binary layout or compression
"""
