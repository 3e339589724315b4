"""Contains the name for the logger of ForwardKit modules.

``forwardkit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages are grouped in different levels:

* ``INFO``: How many function evaluations a derivative request will cost.
* ``WARNING``: An indication that something unexpected
    happened which may require attention, e.g. a zero step size or a
    recursion that will evaluate the function a very large number of times.

By default, only messages of level ``WARNING`` are displayed.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``forwardkit.logger.forwardkit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.INFO,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "forwardkit"
forwardkit_logger = logging.getLogger(logger_name)
