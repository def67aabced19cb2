"""Configuration constants for chemkit."""

# -----------------------
# Formulas
# -----------------------
MAX_COUNT_DIGITS = 6  # longest coefficient or per-element count

# -----------------------
# Reactions
# -----------------------
MAX_REACTANTS = 10
MAX_PRODUCTS = 10
DEFAULT_MAX_RESULTS = 20  # reactions returned by an element search

# -----------------------
# Molecules
# -----------------------
MAX_ATOMS_PER_MOLECULE = 100
MAX_BONDS_PER_MOLECULE = 150

# -----------------------
# Periodic table
# -----------------------
NUM_ELEMENTS = 118
PERIODIC_OVERVIEW_LIMIT = 36  # through Krypton

# -----------------------
# Logging
# -----------------------
LOGGING_LEVEL = "WARNING"  # options: DEBUG, INFO, WARNING, ERROR
