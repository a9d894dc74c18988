# Gradient ordered densest to sparsest, indexed by brightness ratio
ASCII_GRADIENT = "@#%$&*+=-:. "

# Filled to hollow dots, then blank
DOTS = "●◉○◌ "

# Full block and shades (U+2588, U+2593, U+2592, U+2591), then blank
SHADES = "█▓▒░ "

# Upper brightness limits shared by the dot and shade ladders
LADDER_LIMITS = (50, 100, 150, 200)
