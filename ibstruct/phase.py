'''Prescribed motion of target points between two configurations.

The motion is periodic: during the contraction phase targets move from their
phase 1 positions to their phase 2 positions, and during the expansion phase
they move back. Within each phase, progress is eased by the piecewise
polynomial g(tau) (phase_blend), which is quadratic at both ends and cubic in
the middle.

This is the pulsing heart wall of IB2d. update_target_point_positions is meant
to be called once per time step by the simulation driver.
'''

from pathlib import Path
import numpy as np

from . import dataio

# Period info (seconds)
CONTRACTION_TIME = 0.05             # tP1: phase 1 -> phase 2
EXPANSION_TIME = 0.05               # tP2: phase 2 -> phase 1

# Normalized phase progress at which g switches polynomials
TAU_1 = 0.1
TAU_2 = 0.9
TAU_DECIMALS = 12

# Coefficients for polynomial phase-interpolation on tau in [0,1]:
#   g1(tau) = A*tau**2                      tau < TAU_1
#   g2(tau) = C*tau**3 + D*tau**2 + E*tau + H
#   g3(tau) = -B*(tau-1)**2 + 1             tau >= TAU_2
# g1(0) = 0 and g3(1) = 1 exactly. g2 is odd-symmetric about (0.5, 0.5), so
# D = -1.5*C and g2(0.5) = 0.5. With these values g2 sits H below g1 at TAU_1
# and H above g3 at TAU_2; check both breakpoints with phase_blend_jumps if
# the coefficients are ever changed.
A = 2.739726027397260
B = 2.739726027397260
C = -2.029426686960933
D = 3.044140030441400
E = -0.015220700152207
H = 0.000253678335870

DEFAULT_REFERENCE_FILE = 'All_Positions.txt'



def phase_blend(tau):
    '''Piecewise polynomial blend fraction g(tau) for normalized progress tau
    through a phase. Accepts a scalar or an array.'''
    tau_arr = np.asarray(tau, dtype=float)
    g = np.piecewise(tau_arr,
                     [tau_arr < TAU_1,
                      (tau_arr >= TAU_1) & (tau_arr < TAU_2),
                      tau_arr >= TAU_2],
                     [lambda s: A*s**2,
                      lambda s: C*s**3 + D*s**2 + E*s + H,
                      lambda s: -B*(s-1)**2 + 1])
    if g.ndim == 0:
        return float(g)
    return g



def phase_blend_jumps():
    '''Return the step g(TAU_1+) - g(TAU_1-) and g(TAU_2+) - g(TAU_2-) in the
    blend function at its two breakpoints.'''
    jump1 = (C*TAU_1**3 + D*TAU_1**2 + E*TAU_1 + H) - A*TAU_1**2
    jump2 = (-B*(TAU_2-1)**2 + 1) - (C*TAU_2**3 + D*TAU_2**2 + E*TAU_2 + H)
    return jump1, jump2



def phase_progress(current_time, tP1=CONTRACTION_TIME, tP2=EXPANSION_TIME):
    '''Locate current_time on the periodic phase clock.

    Parameters
    ----------
    current_time : float
        simulation time
    tP1, tP2 : float
        duration of the contraction and expansion phases

    Returns
    -------
    phase : int
        1 while moving from phase 1 to phase 2 positions, 2 while moving back
    tau : float
        normalized progress through that phase, in [0,1]
    '''
    if tP1 <= 0 or tP2 <= 0:
        raise ValueError("Phase durations must be positive.")
    period = tP1 + tP2
    t = current_time % period
    # round off modulo error so t and t+period fall on the same side of a
    #   breakpoint in phase_blend
    if t <= tP1:
        return 1, round(t/tP1, TAU_DECIMALS)
    else:
        return 2, round((t-tP1)/tP2, TAU_DECIMALS)



class ReferencePositionCache:
    '''Opt-in cache for reference positions files.

    Entries are keyed on the resolved path and the file's modification time,
    so an edited file is read again on the next lookup.
    '''

    def __init__(self):
        self._entries = {}

    def __len__(self):
        return len(self._entries)

    def get(self, filename):
        '''Return (P1, P2) for filename, reading it only if it has not been
        read before or has changed on disk since.'''
        path = Path(filename)
        if not path.is_file():
            raise FileNotFoundError("File {} not found!".format(filename))
        key = (str(path.resolve()), path.stat().st_mtime_ns)
        if key not in self._entries:
            # drop stale entries for this path
            for old_key in [k for k in self._entries if k[0] == key[0]]:
                del self._entries[old_key]
            self._entries[key] = dataio.read_target_positions(filename)
        P1, P2 = self._entries[key]
        return P1.copy(), P2.copy()

    def clear(self):
        self._entries.clear()



def update_target_point_positions(dt, current_time, targets,
                                  reference_file=DEFAULT_REFERENCE_FILE,
                                  cache=None):
    '''Move every target point to its prescribed position at current_time.

    The reference file is read on every call unless a ReferencePositionCache
    is passed in. Nothing in targets is changed if reading or validation
    fails.

    Parameters
    ----------
    dt : float
        time step. Not used for positions; kept so that drivers can call
        velocity-based update functions with the same signature.
    current_time : float
        simulation time
    targets : TargetPointTable
        target points to update in place
    reference_file : string, default='All_Positions.txt'
        file of phase 1 and phase 2 positions, one row per target ID
    cache : ReferencePositionCache, optional
        reuse parsed reference files between calls

    Returns
    -------
    TargetPointTable
        targets, with updated current positions
    '''
    if cache is None:
        P1, P2 = dataio.read_target_positions(reference_file)
    else:
        P1, P2 = cache.get(reference_file)

    ids = targets.ids
    if len(ids) > 0 and ids.max() > P1.shape[0]:
        raise IndexError("Target ID {} exceeds the {} rows in {}.".format(
            ids.max(), P1.shape[0], reference_file))
    rows = ids - 1

    phase, tau = phase_progress(current_time)
    g = phase_blend(tau)
    if phase == 1:
        start, end = P1[rows], P2[rows]
    else:
        start, end = P2[rows], P1[rows]

    targets.set_positions(start + g*(end - start))
    return targets
