# -- Mesh Buoyancy Runner -- #

'''
Command-line entry point for floating a mesh body.

Builds a body from a mesh file or a primitive shape, reports its volume,
mass and equilibrium draft, then drops it into the water and prints the
buoyancy force and height at each step.

Usage:
    python -m meshBuoyancy                                  # 1 m box on calm water
    python -m meshBuoyancy --shape sphere --size 0.8 --mass 120
    python -m meshBuoyancy --mesh hull.stl --config configs/hull.json
    python -m meshBuoyancy --wave-height 1.0 --wave-period 8 --water-depth 30
    python -m meshBuoyancy --debug-html debug.html          # plot the last step
'''

from __future__ import annotations

import argparse
from typing import Optional

from meshBuoyancy.geometry.meshLoader import StaticMeshSource, TrimeshSource, boxMesh, icosphereMesh
from meshBuoyancy.geometry.protocols import MeshSource
from meshBuoyancy.geometry.transform import BodyTransform
from meshBuoyancy.geometry.volume import meshVolume
from meshBuoyancy.logConfig import setupLogging
from meshBuoyancy.simulation.config import BuoyancyConfig
from meshBuoyancy.simulation.equilibrium import findEquilibriumDraft
from meshBuoyancy.simulation.orchestrator import MeshForceOrchestrator
from meshBuoyancy.simulation.rigidBody import RigidBodyState
from meshBuoyancy.visualization.debugDraw import PlotlyDebugDrawer
from meshBuoyancy.water.linearWaveTheory import WaveFieldSurface
from meshBuoyancy.water.surfaceFactory import createWaterSurface


#--------------------------------------------------------------------#
# -- CLI Argument Parser -- #
#--------------------------------------------------------------------#

def buildParser() -> argparse.ArgumentParser:
    '''Build the CLI argument parser.'''
    parser = argparse.ArgumentParser(
        description='meshBuoyancy -- per-triangle buoyancy for mesh bodies',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    body = parser.add_mutually_exclusive_group()
    body.add_argument(
        '--mesh', type=str, default=None,
        help='Closed mesh file readable by trimesh (STL, OBJ, PLY, ...)',
    )
    body.add_argument(
        '--shape', type=str, default='box', choices=['box', 'sphere'],
        help='Primitive body when no mesh is given (default: box)',
    )
    parser.add_argument(
        '--size', type=float, default=1.0,
        help='Box edge length or sphere diameter [m] (default: 1.0)',
    )
    parser.add_argument(
        '--config', type=str, default=None,
        help='Path to JSON body configuration file',
    )
    parser.add_argument(
        '--mass', type=float, default=None,
        help='Body mass [kg] (default: config override, else half the displaced water)',
    )
    parser.add_argument(
        '--depth', type=float, default=0.0,
        help='Initial height of the body origin relative to the water [m] (default: 0)',
    )
    parser.add_argument(
        '--wave-height', type=float, default=None,
        help='Regular wave height [m]; enables a linear wave field',
    )
    parser.add_argument(
        '--wave-period', type=float, default=8.0,
        help='Wave period [s] (default: 8)',
    )
    parser.add_argument(
        '--water-depth', type=float, default=30.0,
        help='Still water depth for the wave field [m] (default: 30)',
    )
    parser.add_argument(
        '--steps', type=int, default=200,
        help='Simulation steps (default: 200)',
    )
    parser.add_argument(
        '--dt', type=float, default=0.01,
        help='Time step [s] (default: 0.01)',
    )
    parser.add_argument(
        '--dynamic', action='store_true',
        help='Enable hydrodynamic drag forces',
    )
    parser.add_argument(
        '--debug-html', type=str, default=None,
        help='Write a Plotly debug view of the final step to this HTML file',
    )
    parser.add_argument(
        '--log-level', type=str, default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: WARNING)',
    )

    return parser


#--------------------------------------------------------------------#
# -- Setup Helpers -- #
#--------------------------------------------------------------------#

def buildMeshSource(args: argparse.Namespace) -> MeshSource:
    '''Mesh source for the requested file or primitive.'''
    if args.mesh:
        return TrimeshSource(args.mesh, strict=True)
    if args.shape == 'sphere':
        return StaticMeshSource(icosphereMesh(radius=args.size / 2.0))
    return StaticMeshSource(boxMesh(args.size))


def buildConfig(args: argparse.Namespace) -> BuoyancyConfig:
    '''Body configuration from file and flags; flags win.'''
    config = BuoyancyConfig.fromJson(args.config) if args.config else BuoyancyConfig()

    if args.mass is not None:
        config.overrideMass = True
        config.massKg = args.mass
    if args.dynamic:
        config.useDynamicForces = True
    if args.wave_height is not None:
        config.surface = {
            'type': 'waves',
            'wave': {
                'height': args.wave_height,
                'period': args.wave_period,
                'depth': args.water_depth,
            },
        }
    if args.debug_html:
        config.drawSubtriangles = True
        config.drawWaterline = True
        config.drawForceArrows = True

    return config


#--------------------------------------------------------------------#
# -- Simulation -- #
#--------------------------------------------------------------------#

def runSimulation(args: argparse.Namespace) -> dict:
    '''
    Build the body, report its floating properties, and run a drop test.

    Parameters:
    -----------
    args : argparse.Namespace
        Parsed command-line arguments

    Returns:
    --------
    dict : Summary with volume, mass, draft and final height
    '''
    config = buildConfig(args)
    meshSource = buildMeshSource(args)
    mesh = meshSource.extract()
    water = createWaterSurface(config.surface)

    print()
    print('=' * 62)
    print('  MESH BUOYANCY -- DROP TEST')
    print('=' * 62)
    print()

    #--------------------------------------------------------------------#
    # Body Setup
    #--------------------------------------------------------------------#
    print('-' * 62)
    print('  BODY SETUP')
    print('-' * 62)

    volume = meshVolume(mesh)
    if config.overrideMass:
        massKg = config.massKg
    elif config.overrideMeshDensity:
        massKg = config.meshDensity * volume
    else:
        massKg = 0.5 * config.waterDensity * volume

    print(f'  Vertices:          {mesh.vertexCount:8d}')
    print(f'  Triangles:         {mesh.triangleCount:8d}')
    print(f'  Volume:            {volume:12.6f} m^3')
    print(f'  Mass:              {massKg:12.3f} kg')
    print(f'  Water Density:     {config.waterDensity:12.1f} kg/m^3')
    print(f'  Water Surface:     {water!r}')
    print()

    #--------------------------------------------------------------------#
    # Static Equilibrium
    #--------------------------------------------------------------------#
    print('-' * 62)
    print('  STATIC EQUILIBRIUM (CALM WATER)')
    print('-' * 62)

    equilibrium = findEquilibriumDraft(mesh, massKg, config)
    print(f'  Floats:            {str(equilibrium.floats):>8}')
    print(f'  Draft:             {equilibrium.draft:12.6f} m')
    print(f'  Displaced Volume:  {equilibrium.submergedVolume:12.6f} m^3')
    print(f'  Buoyancy:          {equilibrium.buoyancyForce:12.3f} N')
    print()

    #--------------------------------------------------------------------#
    # Drop Test
    #--------------------------------------------------------------------#
    print('-' * 62)
    print('  RUNNING SIMULATION')
    print('-' * 62)
    print()
    print(f'  {"Time":>8}  {"Height":>10}  {"Fz":>12}  {"Area":>10}  {"Forces":>8}')
    print(f'  {"(s)":>8}  {"(m)":>10}  {"(N)":>12}  {"(m^2)":>10}  {"":>8}')
    print('  ' + '-' * 56)

    body = RigidBodyState(
        massKg=massKg,
        transform=BodyTransform(position=[0.0, 0.0, args.depth]),
        inertia=massKg * args.size ** 2 / 6.0,
    )
    drawer = PlotlyDebugDrawer() if args.debug_html else None
    orchestrator = MeshForceOrchestrator(
        meshSource, water=water, body=body, config=config, debugDrawer=drawer, name='body',
    )

    printInterval = max(1, args.steps // 20)
    summary = None
    for stepIndex in range(args.steps):
        if drawer is not None:
            drawer.clear()

        summary = orchestrator.step()
        if stepIndex % printInterval == 0 or stepIndex == args.steps - 1:
            print(
                f'  {stepIndex * args.dt:8.3f}  {body.transform.position[2]:10.4f}  '
                f'{summary.totalForce[2]:12.3f}  {summary.submergedArea:10.4f}  '
                f'{summary.appliedForces:8d}'
            )

        body.integrate(args.dt, config.gravity)
        if isinstance(water, WaveFieldSurface):
            water.advance(args.dt)

    finalHeight = float(body.transform.position[2])
    print()
    print(f'  Final Height:      {finalHeight:12.6f} m')
    print()

    if drawer is not None:
        fig = drawer.buildFigure(title=f'Buoyancy Debug View (t = {args.steps * args.dt:.2f} s)')
        fig.write_html(args.debug_html)
        print(f'  Debug view written to {args.debug_html}')
        print()

    return {
        'volume': volume,
        'massKg': massKg,
        'draft': equilibrium.draft,
        'floats': equilibrium.floats,
        'finalHeight': finalHeight,
        'issue': summary.issue if summary is not None else None,
    }


def main(argv: Optional[list[str]] = None) -> None:
    '''CLI entry point.'''
    parser = buildParser()
    args = parser.parse_args(argv)
    setupLogging(args.log_level)
    runSimulation(args)


if __name__ == '__main__':
    main()
