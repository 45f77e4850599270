#! /usr/bin/env python3
'''
This example shows how to bring an old IB2d geometry file up to date.

Older IB2d examples stored their Lagrangian points in .vertex_OLD files that
used a different coordinate frame. convert_vertex_file reads one, shifts every
point by (0.0125, 0.035) into the current frame, and writes a normalized .vertex
file next to it. Here we make a small leaf-shaped structure in the old frame
first so that there is something to convert.
'''

import numpy as np
import ibstruct
from ibstruct import dataio

# Build a leaf outline in the legacy frame and save it the way old scripts did:
#   the number of points on the first line, then x y pairs.
theta = np.linspace(0, 2*np.pi, 60, endpoint=False)
x = 0.02*np.sin(theta)
y = 0.06*(1 - np.cos(theta))*0.9
with open('leaf.vertex_OLD', 'w') as f:
    f.write('{}\n'.format(len(theta)))
    for xx, yy in zip(x, y):
        f.write('{} {}\n'.format(xx, yy))

# Convert. With plot=True the shifted points are shown on the [0,0.1]x[0,0.2]
#   window so you can check that the structure landed where it should.
vertices = ibstruct.convert_vertex_file('leaf', plot=True)

# The new file can be read back with the normalized reader.
check = dataio.read_IB2d_vertices('leaf.vertex')
print("Max difference after reading back: {}".format(np.abs(check-vertices).max()))
