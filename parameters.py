"""System parameters for Liar's Dice bet threshold analysis.

All system-wide constants are defined here and imported by other modules.
"""

# Dice configuration
NUM_DICE_PER_PLAYER = 5
NUM_PLAYERS = 10  # Largest table the analysis covers

# Die faces
NUM_FACES = 6  # Faces on a die (1-6)

# A die matches a bid if it shows the target face or a wild one
SUCCESS_PROBABILITY_NUMERATOR = 2
SUCCESS_PROBABILITY_DENOMINATOR = NUM_FACES  # p = 2/6 = 1/3

# Confidence levels the rule of thumb is published for
CONFIDENCE_LEVELS = (0.1, 0.5, 0.9)

# Rule-of-thumb multipliers: bet ~= multiplier * dice in play
APPROXIMATION_MULTIPLIERS = {
    0.1: 0.40,
    0.5: 0.33,
    0.9: 0.25,
}

# Plot configuration
PLOT_OUTPUT_FILE = "bet_thresholds.png"
PLOT_DPI = 150

# Derived constants
MAX_DICE = NUM_PLAYERS * NUM_DICE_PER_PLAYER  # Dice in play at a full table
