"""
I define the bit-layout constants shared by packing, configuration and the batch
scorer. A composite score is (weight << TIEBREAK_BITS) | tiebreak, where the tiebreak
is NIBBLE_SLOTS four-bit slots. Scores are held in SCORE_BITS wide unsigned integers
(NumPy uint64 in batch mode), so weights above MAX_WEIGHT are rejected rather than
wrapped.
"""

HAND_SIZE = 5

NIBBLE_BITS = 4
NIBBLE_MASK = 0xF
NIBBLE_SLOTS = 5

TIEBREAK_BITS = NIBBLE_BITS * NIBBLE_SLOTS
TIEBREAK_MASK = (1 << TIEBREAK_BITS) - 1

SCORE_BITS = 64
MAX_WEIGHT = (1 << (SCORE_BITS - TIEBREAK_BITS)) - 1

CONFIG_ENV_VAR = "HANDRANK_CONFIG"
