# -- Triangle Clipper Tests -- #

'''
Waterline clipping: case classification, cut points, continuity
across case boundaries, winding preservation and degenerate input.
'''

import numpy as np
import pytest

from meshBuoyancy.geometry.clipper import TriangleClipper, findCutOnEdge
from meshBuoyancy.geometry.protocols import Vertex
from meshBuoyancy.geometry.triangle import Triangle, sortIndicesByHeight


def makeVertex(position, waterLevel=0.0) -> Vertex:
    position = np.asarray(position, dtype=float)
    return Vertex(position, float(position[2] - waterLevel))


def makeTriangle(a, b, c, waterLevel=0.0) -> Triangle:
    return Triangle.fromVertices(
        makeVertex(a, waterLevel), makeVertex(b, waterLevel), makeVertex(c, waterLevel),
    )


def submergedArea(subtriangles) -> float:
    return sum(sub.area for sub in subtriangles)


######################################################################
# -- Height Sorting -- #
######################################################################

def testSortIndicesHighestFirst():
    assert sortIndicesByHeight(-1.0, 2.0, 0.5) == [1, 2, 0]


def testSortIndicesKeepsWindingOrderOnTies():
    assert sortIndicesByHeight(0.0, 0.0, 0.0) == [0, 1, 2]
    assert sortIndicesByHeight(1.0, 2.0, 2.0) == [1, 2, 0]


def testTriangleNormalFromWinding():
    triangle = makeTriangle((0, 0, -1), (1, 0, -1), (0, 1, -1))
    assert np.allclose(triangle.normal, [0.0, 0.0, 1.0])
    assert triangle.h.height >= triangle.m.height >= triangle.l.height


######################################################################
# -- Case Classification -- #
######################################################################

def testFullyAboveWaterGivesNothing():
    clipper = TriangleClipper()
    triangle = makeTriangle((0, 0, 1), (1, 0, 2), (0, 1, 3))
    subtriangles, waterline = clipper.clipWithWaterline(triangle)
    assert subtriangles == []
    assert waterline is None


def testFullySubmergedKeepsOriginalCorners():
    clipper = TriangleClipper()
    a, b, c = (0, 0, -3), (1, 0, -1), (0, 1, -2)
    subtriangles, waterline = clipper.clipWithWaterline(makeTriangle(a, b, c))

    assert len(subtriangles) == 1
    assert waterline is None
    sub = subtriangles[0]
    assert np.allclose(sub.a, a)
    assert np.allclose(sub.b, b)
    assert np.allclose(sub.c, c)


def testOneVertexAboveGivesTwoPieces():
    clipper = TriangleClipper()
    # Right triangle in the xz-plane, apex above water
    triangle = makeTriangle((0, 0, -1), (2, 0, -1), (0, 0, 1))
    subtriangles, waterline = clipper.clipWithWaterline(triangle)

    assert len(subtriangles) == 2
    assert submergedArea(subtriangles) == pytest.approx(1.5)
    for sub in subtriangles:
        assert np.all(np.array([sub.a[2], sub.b[2], sub.c[2]]) <= 1e-12)

    start, end = waterline
    assert start[2] == pytest.approx(0.0)
    assert end[2] == pytest.approx(0.0)
    assert np.linalg.norm(end - start) == pytest.approx(1.0)


def testTwoVerticesAboveGivesOnePiece():
    clipper = TriangleClipper()
    triangle = makeTriangle((0, 0, 1), (2, 0, 1), (0, 0, -1))
    subtriangles, waterline = clipper.clipWithWaterline(triangle)

    assert len(subtriangles) == 1
    assert subtriangles[0].area == pytest.approx(0.5)
    assert waterline is not None


def testOnSurfaceVerticesCountAsSubmerged():
    clipper = TriangleClipper()
    triangle = makeTriangle((0, 0, 0), (1, 0, 0), (0, 1, 0))
    subtriangles = clipper.clip(triangle)
    assert len(subtriangles) == 1
    assert subtriangles[0].area == pytest.approx(0.5)


def testEdgeTouchingSurfaceFromAboveGivesNothing():
    clipper = TriangleClipper()
    # Two corners exactly on the surface, the third above it
    triangle = makeTriangle((0, 0, 0), (1, 0, 0), (0, 0, 1))
    assert clipper.clip(triangle) == []


######################################################################
# -- Cut Points -- #
######################################################################

def testCutOnEdgeInterpolatesToZeroHeight():
    start = makeVertex((0, 0, 1))
    end = makeVertex((4, 0, -3))
    cut = findCutOnEdge(start, end)
    assert np.allclose(cut, [1.0, 0.0, 0.0])


def testCutOnLevelEdgeReturnsEnd():
    start = Vertex(np.array([0.0, 0.0, 0.0]), 0.5)
    end = Vertex(np.array([1.0, 0.0, 0.0]), 0.5)
    assert np.allclose(findCutOnEdge(start, end), end.position)


######################################################################
# -- Continuity -- #
######################################################################

def testSubmergedAreaContinuousAcrossCases():
    '''Area changes smoothly as each vertex in turn crosses the surface.'''
    clipper = TriangleClipper()
    base = np.array([(0.0, 0.0, 0.0), (1.0, 0.0, 0.5), (0.0, 1.0, 1.0)])
    fullArea = 0.5 * np.linalg.norm(np.cross(base[1] - base[0], base[2] - base[0]))

    offsets = np.linspace(-1.5, 0.5, 2001)
    areas = []
    for offset in offsets:
        shifted = base + np.array([0.0, 0.0, offset])
        areas.append(submergedArea(clipper.clip(makeTriangle(*shifted))))
    areas = np.array(areas)

    assert areas[0] == pytest.approx(fullArea)
    assert areas[-1] == 0.0
    # Raising the triangle never adds submerged area
    assert np.all(np.diff(areas) <= 1e-12)
    # No jumps at the case boundaries (offsets -1, -0.5 and 0)
    assert np.max(np.abs(np.diff(areas))) < 5e-3


def testSubmergedAreaFollowsWaterLevel():
    clipper = TriangleClipper()
    triangle = makeTriangle((0, 0, -1), (2, 0, -1), (0, 0, 1), waterLevel=-0.5)
    # Trapezoid between z = -1 and z = -0.5, widths 2 and 1.5
    assert submergedArea(clipper.clip(triangle)) == pytest.approx(0.875)


######################################################################
# -- Winding -- #
######################################################################

def testSubtriangleNormalsMatchParent(rng):
    clipper = TriangleClipper()
    checked = 0

    for _ in range(500):
        corners = rng.normal(size=(3, 3))
        triangle = makeTriangle(*corners)
        if triangle.isDegenerate:
            continue

        for sub in clipper.clip(triangle):
            if sub.area < 1e-9:
                continue
            assert np.dot(sub.normal, triangle.normal) > 0.999
            checked += 1

    assert checked > 100


def testWindingPreservedForEveryHeightOrder():
    clipper = TriangleClipper()
    corners = [np.array(p, dtype=float) for p in [(0, 0, -1), (1, 0, 0.5), (0, 1, 0.2)]]

    # Cycle which corner is lowest; the parent normal stays the same
    for shift in range(3):
        a, b, c = corners[shift:] + corners[:shift]
        triangle = makeTriangle(a, b, c)
        for sub in clipper.clip(triangle):
            assert np.dot(sub.normal, triangle.normal) > 0.999


######################################################################
# -- Degenerate Input -- #
######################################################################

@pytest.mark.parametrize('corners', [
    [(0, 0, -1), (0, 0, -1), (1, 0, -1)],
    [(0, 0, -1), (0, 0, -1), (0, 0, -1)],
    [(0, 0, -1), (1, 0, -1), (2, 0, -1)],
    [(0, 0, -1), (0, 0, -1), (0, 0, 1)],
])
def testDegenerateTrianglesProduceNothing(corners):
    triangle = makeTriangle(*corners)
    assert triangle.isDegenerate
    assert np.allclose(triangle.normal, 0.0)
    assert TriangleClipper().clip(triangle) == []


def testNonFiniteHeightsDoNotRaise():
    a = Vertex(np.array([0.0, 0.0, 0.0]), float('nan'))
    b = Vertex(np.array([1.0, 0.0, 0.0]), -1.0)
    c = Vertex(np.array([0.0, 1.0, 0.0]), 1.0)
    subtriangles = TriangleClipper().clip(Triangle.fromVertices(a, b, c))
    assert all(np.isfinite(sub.area) for sub in subtriangles)
