# Expansion strategies
STRATEGY_SHAKE128 = "shake128"
STRATEGY_AES128 = "aes128"

STRATEGIES = (STRATEGY_SHAKE128, STRATEGY_AES128)


# Counters and matrix words are 16-bit little-endian on the wire
WORD_SIZE = 2
MAX_COUNTER = 0xFFFF

# Largest dimension whose row/column indices fit a 16-bit counter
MAX_DIMENSION = MAX_COUNTER + 1

MIN_MODULUS = 2
MAX_MODULUS = 1 << 16


# AES-128 as a keyed PRF over single blocks
AES_KEY_SIZE = 16
AES_BLOCK_SIZE = 16
WORDS_PER_BLOCK = AES_BLOCK_SIZE // WORD_SIZE  # 8 columns per block
BLOCK_PADDING = bytes(AES_BLOCK_SIZE - 2 * WORD_SIZE)


# FrodoKEM public seed length (len_seedA = 128 bits)
SEED_A_SIZE = 16
