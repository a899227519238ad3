# -- Hydrodynamics Subpackage -- #

'''
Per-triangle force models: hydrostatic pressure and quadratic drag.
'''

from meshBuoyancy.hydrodynamics.protocols import Force
from meshBuoyancy.hydrodynamics.forceIntegrator import ForceIntegrator, hydrodynamicForce, hydrostaticForce
