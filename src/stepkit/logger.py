"""Contains the name for the logger of stepkit modules.

``stepkit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages are grouped in different levels:

* ``DEBUG``: Details about individual estimates, e.g. a limit whose
    left- and right-sided values disagree beyond tolerance.
* ``WARNING``: An indication that something unexpected
    happened which may require attention, e.g. a step size that
    underflowed to zero.

By default, only messages of level ``WARNING`` are displayed.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``stepkit.logger.stepkit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "stepkit"
stepkit_logger = logging.getLogger(logger_name)
