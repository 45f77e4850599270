'''
========
IBStruct
========

Provides
  1. Readers and writers for IB2d structure files (dataio)
  2. Conversion of legacy vertex files (geometry)
  3. A TargetPointTable class for target points
  4. Prescribed phase-interpolated motion of target points (phase)
'''

__version__ = '0.1.0'

from .targets import TargetPointTable
from .dataio import MalformedInputError
from .geometry import convert_vertex_file
from .phase import update_target_point_positions, ReferencePositionCache

__all__ = [s for s in dir() if not s.startswith('_')]
