# NTSC luma weights (Y of YUV)
LUMA_R = 0.299
LUMA_G = 0.587
LUMA_B = 0.114

# YUV chrominance weights
U_WEIGHTS = (-0.147, -0.289, 0.436)
V_WEIGHTS = (0.615, -0.515, -0.100)

DARK_LUMA_THRESHOLD = 0.5
GRAY_CHROMA_TOLERANCE = 0.002
NEAR_WHITE_THRESHOLD = 0.91
NEAR_BLACK_THRESHOLD = 0.09
DISTINCT_CHANNEL_THRESHOLD = 0.25

# Added to both lumas so black never divides by zero
CONTRAST_OFFSET = 0.05
CONTRAST_THRESHOLD = 1.4

DEFAULT_ALPHA = 1.0
