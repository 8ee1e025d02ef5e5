"""Container entrypoint that waits for SIGUSR1 before exec'ing the real command."""

from __future__ import annotations

import logging
import os
import signal
import sys
from collections.abc import Sequence

# Fixed value of SIGRTMIN inside Linux containers.
SIGRTMIN = 34
STOP_SIGNAL = SIGRTMIN + 3

log = logging.getLogger(__name__)


class EntrypointError(RuntimeError):
    """Raised when the entrypoint is started without a command."""


def wait_for_start(argv: Sequence[str]) -> tuple[str, list[str]] | None:
    """Block until SIGUSR1 or SIGRTMIN+3 arrives.

    ``argv`` is the full process argument vector. Returns the command and
    its argument vector on SIGUSR1, or None when told to stop instead.
    """
    if len(argv) < 2:
        raise EntrypointError("Not enough arguments to entrypoint!")
    command, args = argv[1], list(argv[1:])

    wanted = {signal.SIGUSR1, STOP_SIGNAL}
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, wanted)
    try:
        log.info("Waiting for SIGUSR1 ...")
        received = signal.sigwait(wanted)
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)

    if received != signal.SIGUSR1:
        log.info("Exiting after signal: %d != SIGUSR1", int(received))
        return None
    return command, args


def main(argv: Sequence[str] | None = None) -> int:
    """Run the entrypoint; on SIGUSR1 replace this process with the command."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    argv = list(sys.argv if argv is None else argv)

    # Avoid zombie processes while running as PID 1.
    signal.signal(signal.SIGCHLD, signal.SIG_IGN)

    try:
        target = wait_for_start(argv)
    except EntrypointError as err:
        log.critical("%s", err)
        return 1
    if target is None:
        return 0

    command, args = target
    log.info("Received SIGUSR1, execing to: %s %s", command, args)
    os.execve(command, args, dict(os.environ))
    return 0


if __name__ == "__main__":
    sys.exit(main())