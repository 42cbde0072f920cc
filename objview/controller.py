"""Single event-processing actor of the viewer.

The window layer translates device input into :class:`Command` members and
schedules :attr:`Signal.TICK` at a fixed cadence; everything goes through
:meth:`Controller.handle` in order, on one thread.
"""

import logging

from .gate import RenderGate
from .state import TransformState
from .utils.types import Command, Signal

# Module logger
logger = logging.getLogger(__name__)


class Controller:
    """Route commands to the state and ticks to the render gate.

    Parameters
    ----------
    state : TransformState
        Pose owned by this controller.
    gate : RenderGate
        Gate built over the same ``state``.
    """

    def __init__(self, state: TransformState, gate: RenderGate):
        if gate.state is not state:
            raise ValueError("The render gate must observe the controller's state.")
        self.state = state
        self.gate = gate
        self.running = True

    def handle(self, event):
        """Process one event.

        Parameters
        ----------
        event : Command or Signal
            A discrete command, a tick or the exit signal.

        Returns
        -------
        bool
            False once :attr:`Signal.EXIT` was received, True otherwise.
        """
        if not self.running:
            return False
        if event is Signal.EXIT:
            logger.debug("Exit requested")
            self.running = False
        elif event is Signal.TICK:
            self.gate.tick()
        elif isinstance(event, Command):
            self.state.apply(event)
        else:
            raise TypeError(f"Unknown event {event!r}.")
        return self.running
