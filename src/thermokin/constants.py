"""Physical constants and input defaults."""

R_GAS = 8.314  # J/(mol·K)
BOLTZMANN = 1.380649e-23  # J/K
PLANCK = 6.62607015e-34  # J·s
AVOGADRO = 6.02214076e23  # 1/mol

# Fallbacks for inputs that are parsed leniently.
DEFAULT_PRECISION = 2
DEFAULT_SCIENTIFIC = False
DEFAULT_INITIAL_CONCENTRATION = 1.0
