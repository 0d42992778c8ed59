"""Metacog package for confidence-rating metrics of psychology experiments.

Modules
------------------
- ``metacog.metrics`` provides scalar metrics: accuracy, mean confidence,
  bias, and the difference and rank-correlation forms of discrimination.
- ``metacog.aggregate`` applies metrics per participant or per item over a
  long-format table.
- ``metacog.reshape`` converts the wide ``a{n}/c{n}/d{n}/t{n}`` layout into
  the long layout.
- ``metacog.datasets`` builds reproducible synthetic wide datasets.
- ``metacog.utils`` provides ranking and correlation helpers shared across
  modules.

"""

import logging

__version__ = "0.1.0"

from . import aggregate, datasets, metrics, reshape, utils

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["aggregate", "datasets", "metrics", "reshape", "utils"]
