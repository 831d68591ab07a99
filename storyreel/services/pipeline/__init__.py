"""
Generation pipeline: script -> per-scene visuals -> per-scene narration.

The generators are independent; sequencing is done by the caller
(see ``storyreel.services.use_cases``).
"""
