# -- Physical Constants and Tolerances for Mesh Buoyancy -- #

'''
Physical constants and numerical tolerances used by the triangle
clipper, force integrator, and mesh force orchestrator.

All values in SI units unless otherwise noted.
'''

######################################################################
# -- Water Properties -- #
######################################################################

# Fresh water density [kg/m^3]
# Default for the per-body configuration
waterDensity: float = 1000.0

# Gravitational acceleration magnitude [m/s^2]
gravity: float = 9.81

######################################################################
# -- Body Defaults -- #
######################################################################

# Density used when the mesh density override is enabled [kg/m^3]
# Roughly that of a softwood hull
defaultMeshDensity: float = 600.0

# Mass used when the explicit mass override is enabled [kg]
defaultMassKg: float = 100.0

# Hydrodynamic (quadratic drag) coefficient, dimensionless
defaultDragCoefficient: float = 1.0

######################################################################
# -- Wave Physics Constants -- #
######################################################################

# Depth-limited breaking ratio H/d (McCowan 1894)
breakingDepthRatio: float = 0.78

# Steepness-limited breaking ratio H/L (Miche 1944)
breakingSteepnessRatio: float = 1.0 / 7.0

######################################################################
# -- Numerical Tolerances -- #
######################################################################

# Heights within this band of zero count as on the surface [m].
# On-surface vertices are classified as submerged.
heightTolerance: float = 1e-6

# Triangles and sub-triangles below this area produce no force [m^2]
areaTolerance: float = 1e-12

# Forces with a smaller magnitude are not sent to the rigid body [N]
forceTolerance: float = 1e-9
