'''Functions for reading and writing IB2d structure files: legacy and normalized
vertex files, target files, and the reference positions files used to drive
target points.

All readers return numpy arrays. Every reader raises FileNotFoundError if the
file does not exist and MalformedInputError if its contents do not match the
expected layout.
'''

import warnings
import decimal
from pathlib import Path
import numpy as np



class MalformedInputError(ValueError):
    '''Raised when a data file does not match its expected layout.'''
    pass



def _check_file(filename):
    path = Path(filename)
    if not path.is_file():
        raise FileNotFoundError("File {} not found!".format(filename))
    return path



def _to_floats(tokens, filename, line_num):
    try:
        return [float(tok) for tok in tokens]
    except ValueError:
        raise MalformedInputError("Non-numeric value in {}, line {}: {}".format(
            filename, line_num, ' '.join(tokens))) from None



def _format_coord(value):
    '''Format a float like C's %1.16e, but from its shortest round-trip decimal
    so that e.g. 0.035 is written as 3.5000000000000000e-02.'''
    value = float(value)
    if value == 0 or not np.isfinite(value):
        return '{:1.16e}'.format(value)
    mantissa, exp = '{:.16e}'.format(decimal.Decimal(repr(value))).split('e')
    return '{}e{:+03d}'.format(mantissa, int(exp))



#############################################################################
#                                                                           #
#                               DATA READERS                                #
#                                                                           #
#############################################################################

def read_legacy_vertices(filename):
    '''Import points from a legacy IB2d vertex file (e.g. struct.vertex_OLD).

    The format is loose: the file is one stream of numeric tokens, regardless
    of how it is broken across lines. The first token is the number of points
    N and the next 2N tokens are x,y pairs. Older files store the count as a
    two-column row "N pad"; if the first line holds more than the count and
    exactly 2N+1 values follow it, the value after N is skipped as padding.

    Parameters
    ----------
    filename : string
        path and filename of the legacy vertex file

    Returns
    -------
    array
        Nx2 array of 2D vertices
    '''
    _check_file(filename)
    tokens = []
    header_len = None
    with open(filename) as f:
        for n, line in enumerate(f, start=1):
            values = _to_floats(line.split(), filename, n)
            if header_len is None and len(values) > 0:
                header_len = len(values)
            tokens.extend(values)

    if len(tokens) == 0:
        raise MalformedInputError("No vertex count found in {}.".format(filename))
    count = tokens.pop(0)
    if not np.isfinite(count) or count < 0 or count != int(count):
        raise MalformedInputError("Vertex count in {} must be a non-negative "
                                  "integer, got {}.".format(filename, count))
    number_of_vertices = int(count)

    if header_len > 1 and len(tokens) == 2*number_of_vertices+1:
        # "N pad" header row
        tokens.pop(0)

    n_pairs = len(tokens)//2
    if n_pairs < number_of_vertices:
        raise MalformedInputError("{} states {} vertices but only {} ".format(
            filename, number_of_vertices, n_pairs)+"coordinate pairs were found.")
    if len(tokens) > 2*number_of_vertices:
        warnings.warn("{} contains more values than its stated {} vertices. ".format(
            filename, number_of_vertices)+"Extra values ignored.", UserWarning)

    return np.array(tokens[:2*number_of_vertices], dtype=float).reshape(
        (number_of_vertices,2))



def read_IB2d_vertices(filename):
    '''Import a Lagrangian mesh from an IB2d ascii vertex file.

    Parameters
    ----------
    filename : string
        path and filename of the vertex file

    Returns
    -------
    array
        Nx2 array of 2D vertices
    '''
    _check_file(filename)
    rows = []
    with open(filename) as f:
        header = f.readline().split()
        if len(header) == 0:
            raise MalformedInputError("No vertex count found in {}.".format(filename))
        try:
            number_of_vertices = int(header[0])
        except ValueError:
            raise MalformedInputError("Vertex count in {} is not an integer: {}".format(
                filename, header[0])) from None
        for n, line in enumerate(f, start=2):
            vertex_str = line.split()
            if len(vertex_str) == 0:
                continue
            if len(vertex_str) < 2:
                raise MalformedInputError("Expected x y on line {} of {}.".format(
                    n, filename))
            rows.append(_to_floats(vertex_str[:2], filename, n))
    if number_of_vertices != len(rows):
        raise MalformedInputError(
            "Mismatch btwn stated and actual number of vertices in {}.".format(filename))

    return np.array(rows, dtype=float).reshape((number_of_vertices,2))



def read_IB2d_targets(filename):
    '''Import target point information from an IB2d ascii target file. The
    first line is the number of target points, and each following line is a
    Lagrangian point ID and its target stiffness.

    Parameters
    ----------
    filename : string
        path and filename of the target file

    Returns
    -------
    ids : array of ints
    stiffness : array of floats
    '''
    _check_file(filename)
    ids = []
    kStiffs = []
    with open(filename) as f:
        header = f.readline().split()
        if len(header) == 0:
            raise MalformedInputError("No target count found in {}.".format(filename))
        try:
            N_target = int(header[0])
        except ValueError:
            raise MalformedInputError("Target count in {} is not an integer: {}".format(
                filename, header[0])) from None
        for n, line in enumerate(f, start=2):
            target_str = line.split()
            if len(target_str) == 0:
                continue
            if len(target_str) < 2:
                raise MalformedInputError("Expected ID kStiff on line {} of {}.".format(
                    n, filename))
            ID, kStiff = _to_floats(target_str[:2], filename, n)
            if ID != int(ID):
                raise MalformedInputError("Non-integer target ID on line {} of {}.".format(
                    n, filename))
            ids.append(int(ID))
            kStiffs.append(kStiff)
    if N_target != len(ids):
        raise MalformedInputError(
            "Mismatch btwn stated and actual number of targets in {}.".format(filename))

    return np.array(ids, dtype=int), np.array(kStiffs, dtype=float)



def read_target_positions(filename):
    '''Read a reference positions file (e.g. All_Positions.txt) for driving
    target points between two configurations. Each non-blank row is

        phase1_x phase1_y phase2_x phase2_y

    and row i corresponds to the target point with ID i+1.

    Parameters
    ----------
    filename : string
        path and filename of the positions file

    Returns
    -------
    P1 : array
        Nx2 array of phase 1 positions
    P2 : array
        Nx2 array of phase 2 positions
    '''
    _check_file(filename)
    rows = []
    with open(filename) as f:
        for n, line in enumerate(f, start=1):
            row_str = line.split()
            if len(row_str) == 0:
                continue
            if len(row_str) < 4:
                raise MalformedInputError("Line {} of {} has {} values; expected 4.".format(
                    n, filename, len(row_str)))
            if len(row_str) > 4:
                warnings.warn("Line {} of {} has more than 4 values. ".format(
                    n, filename)+"Extra values ignored.", UserWarning)
            rows.append(_to_floats(row_str[:4], filename, n))

    mat = np.array(rows, dtype=float).reshape((len(rows),4))
    return mat[:,0:2], mat[:,2:4]



#############################################################################
#                                                                           #
#                               DATA WRITERS                                #
#                                                                           #
#############################################################################

def write_IB2d_vertices(filename, vertices):
    '''Write 2D points to an IB2d ascii vertex file: the number of points on
    the first line followed by one "x y" row per point in %1.16e format.

    Parameters
    ----------
    filename : string
        path and filename of the vertex file to write
    vertices : array
        Nx2 array of 2D vertices
    '''
    vertices = np.asarray(vertices, dtype=float)
    if vertices.ndim != 2 or vertices.shape[1] != 2:
        raise ValueError("vertices must be an Nx2 array.")
    with open(filename, 'w') as fobj:
        fobj.write('{}\n'.format(vertices.shape[0]))
        for x, y in vertices:
            fobj.write('{} {}\n'.format(_format_coord(x), _format_coord(y)))



def write_target_positions(filename, P1, P2):
    '''Write a reference positions file readable by read_target_positions.

    Parameters
    ----------
    filename : string
        path and filename of the positions file to write
    P1, P2 : array
        Nx2 arrays of phase 1 and phase 2 positions, ordered by target ID
    '''
    P1 = np.asarray(P1, dtype=float)
    P2 = np.asarray(P2, dtype=float)
    if P1.shape != P2.shape or P1.ndim != 2 or P1.shape[1] != 2:
        raise ValueError("P1 and P2 must be Nx2 arrays of the same shape.")
    with open(filename, 'w') as fobj:
        for p1, p2 in zip(P1, P2):
            fobj.write(' '.join(_format_coord(v) for v in (*p1, *p2))+'\n')
