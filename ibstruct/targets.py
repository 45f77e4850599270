'''
TargetPointTable class of IBStruct.

A target point is a Lagrangian point tied by a stiff spring to a prescribed
location. IB2d passes these around as an Nx4 matrix [ID, x, y, kStiff] where the
row number doubles as the ID; here the ID is an explicit index that is checked
to run 1..N in row order.
'''

import numpy as np
import pandas as pd

from . import dataio

COLUMNS = ['original_x', 'original_y', 'stiffness', 'current_x', 'current_y']

class TargetPointTable:
    '''
    Table of target points keyed by integer ID.

    Parameters
    ----------
    ids : array-like of ints
        Lagrangian point IDs. Must be exactly 1..N in order.
    x, y : array-like of floats
        original (setup) positions of the target points
    stiffness : array-like of floats
        target spring stiffness of each point

    Attributes
    ----------
    data : pandas DataFrame
        indexed by ID with columns original_x, original_y, stiffness, current_x,
        and current_y. Only the current_* columns change after construction.
    '''

    def __init__(self, ids, x, y, stiffness):
        ids = np.asarray(ids)
        x = np.asarray(x, dtype=float)
        y = np.asarray(y, dtype=float)
        stiffness = np.asarray(stiffness, dtype=float)
        if not (ids.ndim == x.ndim == y.ndim == stiffness.ndim == 1):
            raise ValueError("ids, x, y, and stiffness must be 1D.")
        if not (len(ids) == len(x) == len(y) == len(stiffness)):
            raise ValueError("ids, x, y, and stiffness must have the same length.")
        if np.any(ids != np.round(ids)):
            raise ValueError("Target point IDs must be integers.")
        ids = ids.astype(int)
        if not np.array_equal(ids, np.arange(1, len(ids)+1)):
            raise ValueError("Target point IDs must be contiguous, start at 1, "+
                             "and be listed in order.")

        self.data = pd.DataFrame({'original_x': x, 'original_y': y,
                                  'stiffness': stiffness,
                                  'current_x': x.copy(), 'current_y': y.copy()},
                                 index=pd.Index(ids, name='ID'), columns=COLUMNS)



    @classmethod
    def from_array(cls, targets):
        '''Build a table from an IB2d-style Nx4 [ID, x, y, kStiff] array.'''
        targets = np.asarray(targets, dtype=float)
        if targets.ndim != 2 or targets.shape[1] != 4:
            raise ValueError("targets must be an Nx4 array of [ID, x, y, kStiff].")
        return cls(targets[:,0], targets[:,1], targets[:,2], targets[:,3])



    @classmethod
    def from_IB2d(cls, vertex_file, target_file):
        '''Build a table from an IB2d .vertex file and .target file. Each
        target's original position is the vertex with the same (1-based) ID.

        Parameters
        ----------
        vertex_file : string
            path and filename of the vertex file
        target_file : string
            path and filename of the target file (ID kStiff rows)
        '''
        vertices = dataio.read_IB2d_vertices(vertex_file)
        ids, kStiffs = dataio.read_IB2d_targets(target_file)
        if len(ids) > 0 and ids.max() > vertices.shape[0]:
            raise IndexError("Target ID {} exceeds the {} vertices in {}.".format(
                ids.max(), vertices.shape[0], vertex_file))
        if len(ids) > 0 and ids.min() < 1:
            raise IndexError("Target IDs must be 1-based, found {}.".format(ids.min()))
        return cls(ids, vertices[ids-1,0], vertices[ids-1,1], kStiffs)



    def __len__(self):
        return len(self.data)

    def __repr__(self):
        return 'TargetPointTable({} points)'.format(len(self))

    @property
    def ids(self):
        return self.data.index.to_numpy()

    @property
    def stiffness(self):
        return self.data['stiffness'].to_numpy()

    @property
    def positions(self):
        '''Current target positions as an Nx2 array, ordered by ID.'''
        return self.data[['current_x', 'current_y']].to_numpy()

    @property
    def original_positions(self):
        return self.data[['original_x', 'original_y']].to_numpy()



    def set_positions(self, positions):
        '''Overwrite the current positions with an Nx2 array ordered by ID.'''
        positions = np.asarray(positions, dtype=float)
        if positions.shape != (len(self), 2):
            raise ValueError("positions must have shape ({}, 2).".format(len(self)))
        self.data['current_x'] = positions[:,0]
        self.data['current_y'] = positions[:,1]



    def reset(self):
        '''Return every target point to its original position.'''
        self.set_positions(self.original_positions)



    def to_array(self):
        '''Return the IB2d-style Nx4 [ID, x, y, kStiff] array using current
        positions.'''
        return np.column_stack((self.ids.astype(float), self.positions,
                                self.stiffness))
