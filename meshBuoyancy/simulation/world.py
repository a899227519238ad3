# -- Buoyancy World -- #

'''
Steps the buoyancy of many bodies together.

Bodies share nothing mutable, so with maxWorkers > 1 each body's step
runs as its own task on a thread pool. Water queries must then be safe
to read from several threads; the bundled surfaces are, as long as
they are not advanced mid-step.
'''

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from meshBuoyancy.simulation.orchestrator import MeshForceOrchestrator, StepSummary

logger = logging.getLogger(__name__)


class BuoyancyWorld:
    '''Collection of buoyant bodies stepped once per tick.'''

    def __init__(self) -> None:
        self._bodies: list[MeshForceOrchestrator] = []

    def addBody(self, orchestrator: MeshForceOrchestrator) -> MeshForceOrchestrator:
        '''Register a body; returns it for chaining.'''
        self._bodies.append(orchestrator)
        logger.debug('Added body %s (%d total)', orchestrator.name, len(self._bodies))
        return orchestrator

    @property
    def bodies(self) -> list[MeshForceOrchestrator]:
        return list(self._bodies)

    def __len__(self) -> int:
        return len(self._bodies)

    def step(self, maxWorkers: int = 1) -> list[StepSummary]:
        '''
        Step every body once.

        Parameters:
        -----------
        maxWorkers : int
            Threads to spread bodies over; 1 steps them in order on
            the calling thread

        Returns:
        --------
        list[StepSummary] : One summary per body, in insertion order
        '''
        if maxWorkers < 1:
            raise ValueError(f'maxWorkers must be at least 1, got {maxWorkers}')

        if maxWorkers == 1 or len(self._bodies) <= 1:
            return [body.step() for body in self._bodies]

        with ThreadPoolExecutor(max_workers=maxWorkers) as executor:
            return list(executor.map(lambda body: body.step(), self._bodies))
