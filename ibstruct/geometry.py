'''Conversion of legacy IB2d vertex files into the normalized .vertex format.

Legacy .vertex_OLD files were written in a coordinate frame offset from the
one used by current IB2d geometry, so every point is shifted by
(VERTEX_X_OFFSET, VERTEX_Y_OFFSET) during conversion.
'''

import matplotlib.pyplot as plt

from . import dataio

VERTEX_X_OFFSET = 0.0125
VERTEX_Y_OFFSET = 0.035



def plot_vertices(vertices, ax=None, show=True):
    '''Plot 2D vertices for a visual check of a converted structure.

    Parameters
    ----------
    vertices : array
        Nx2 array of 2D vertices
    ax : matplotlib Axes, optional
        axes to draw on. a new figure is created if not given.
    show : bool, default=True
        call plt.show() after plotting

    Returns
    -------
    matplotlib Axes
    '''
    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111)
    ax.plot(vertices[:,0], vertices[:,1], 'r*')
    ax.plot(vertices[:,0], vertices[:,1], 'bo', fillstyle='none')
    ax.axis([0, 0.1, 0, 0.2])
    if show:
        plt.show()
    return ax



def convert_vertex_file(struct_name, plot=False):
    '''Read struct_name.vertex_OLD, shift it into the current frame, and write
    the result to struct_name.vertex.

    Parameters
    ----------
    struct_name : string
        path and name of the structure, without extension. e.g. 'leaf' reads
        leaf.vertex_OLD and writes leaf.vertex
    plot : bool, default=False
        show the shifted vertices with plot_vertices

    Returns
    -------
    array
        Nx2 array of the shifted vertices that were written
    '''
    vertices = dataio.read_legacy_vertices(str(struct_name)+'.vertex_OLD')
    vertices[:,0] += VERTEX_X_OFFSET
    vertices[:,1] += VERTEX_Y_OFFSET

    if plot:
        plot_vertices(vertices)

    out_file = str(struct_name)+'.vertex'
    dataio.write_IB2d_vertices(out_file, vertices)
    print("Wrote {} vertices to {}.".format(vertices.shape[0], out_file))
    return vertices
