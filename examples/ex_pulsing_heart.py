#! /usr/bin/env python3
'''
This example drives the wall of a simple 2D "heart" with target points.

In IB2d, target points are Lagrangian points tied by stiff springs to target
positions. Moving the target positions each time step moves the structure. 
update_target_point_positions moves every target between a relaxed (phase 1) 
and contracted (phase 2) configuration read from All_Positions.txt: it 
contracts over 0.05 s, relaxes over the next 0.05 s, and repeats.

Normally the fluid solver would call the update once per step and then compute
spring forces from the new targets. Here we just step time ourselves and watch
the wall move.
'''

import numpy as np
import matplotlib.pyplot as plt
import ibstruct
from ibstruct import dataio, phase

# Geometry: an ellipse of target points, contracted by 30% in phase 2.
N = 80
theta = np.linspace(0, 2*np.pi, N, endpoint=False)
P1 = np.column_stack((0.5 + 0.2*np.cos(theta), 0.5 + 0.3*np.sin(theta)))
P2 = np.column_stack((0.5 + 0.14*np.cos(theta), 0.5 + 0.21*np.sin(theta)))
dataio.write_target_positions('All_Positions.txt', P1, P2)

# IB2d input files for the structure: vertices and target stiffnesses.
dataio.write_IB2d_vertices('heart.vertex', P1)
with open('heart.target', 'w') as f:
    f.write('{}\n'.format(N))
    for ID in range(1, N+1):
        f.write('{} {:1.16e}\n'.format(ID, 2.5e6))

targets = ibstruct.TargetPointTable.from_IB2d('heart.vertex', 'heart.target')

# The reference file does not change during this run, so cache it.
cache = phase.ReferencePositionCache()

dt = 1e-3
times = np.arange(0, 0.2+dt/2, dt)
areas = []
snapshots = {}
for current_time in times:
    phase.update_target_point_positions(dt, current_time, targets, cache=cache)
    pos = targets.positions
    # shoelace formula for the enclosed area
    areas.append(0.5*np.abs(np.dot(pos[:,0], np.roll(pos[:,1],1)) -
                            np.dot(pos[:,1], np.roll(pos[:,0],1))))
    if np.round(current_time, 6) in (0.0, 0.025, 0.05, 0.075):
        snapshots[np.round(current_time, 6)] = pos.copy()

fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(11,5))
for t, pos in snapshots.items():
    ax1.plot(np.append(pos[:,0], pos[0,0]), np.append(pos[:,1], pos[0,1]),
             label='t = {}'.format(t))
ax1.set_aspect('equal')
ax1.legend()
ax1.set_title('Target positions')
ax2.plot(times, areas)
ax2.set_xlabel('time (s)')
ax2.set_ylabel('enclosed area')
ax2.set_title('Two periods of pulsing')
plt.show()
