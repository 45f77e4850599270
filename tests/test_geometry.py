"""
Test suite for converting legacy vertex files.
For use with py.test package.
"""

import pytest
import numpy as np
import matplotlib.pyplot as plt
import ibstruct
from ibstruct import geometry, dataio

###############################################################################
#                                                                             #
#                                   Tests                                     #
#                                                                             #
###############################################################################

def test_convert_vertex_file(tmp_path):
    '''Converted files carry the legacy frame offset in normalized format'''
    struct = tmp_path / 'leaf'
    (tmp_path / 'leaf.vertex_OLD').write_text("3\n0.0 0.0\n1.0 1.0\n2.0 2.0\n")
    verts = ibstruct.convert_vertex_file(struct)

    assert (tmp_path / 'leaf.vertex').read_text() == ("3\n"
        "1.2500000000000000e-02 3.5000000000000000e-02\n"
        "1.0125000000000000e+00 1.0350000000000000e+00\n"
        "2.0125000000000000e+00 2.0350000000000000e+00\n")
    assert np.allclose(verts, [[0.0125,0.035],[1.0125,1.035],[2.0125,2.035]])



def test_convert_offset_property(tmp_path):
    '''Output points are input points plus (0.0125, 0.035)'''
    rng = np.random.default_rng(11)
    P = rng.uniform(-1, 1, size=(40,2))
    struct = str(tmp_path / 'blob')
    with open(struct+'.vertex_OLD', 'w') as f:
        f.write('{}\n'.format(P.shape[0]))
        for x, y in P:
            f.write('{!r} {!r}\n'.format(float(x), float(y)))
    geometry.convert_vertex_file(struct)

    out = dataio.read_IB2d_vertices(struct+'.vertex')
    assert out.shape == P.shape
    assert np.allclose(out[:,0], P[:,0] + geometry.VERTEX_X_OFFSET, rtol=0, atol=1e-15)
    assert np.allclose(out[:,1], P[:,1] + geometry.VERTEX_Y_OFFSET, rtol=0, atol=1e-15)
    with open(struct+'.vertex') as f:
        assert int(f.readline()) == 40



def test_convert_errors(tmp_path):
    '''Missing and short inputs fail without writing output'''
    struct = tmp_path / 'nothing'
    with pytest.raises(FileNotFoundError):
        geometry.convert_vertex_file(struct)
    (tmp_path / 'short.vertex_OLD').write_text("4\n0 0\n1 1\n")
    with pytest.raises(ibstruct.MalformedInputError):
        geometry.convert_vertex_file(tmp_path / 'short')
    assert not (tmp_path / 'short.vertex').exists()



def test_plot_vertices(tmp_path):
    '''The diagnostic plot draws both marker sets on the fixed window'''
    (tmp_path / 'leaf.vertex_OLD').write_text("2\n0.01 0.02\n0.03 0.04\n")
    verts = geometry.convert_vertex_file(tmp_path / 'leaf', plot=True)
    plt.close('all')

    fig, ax = plt.subplots()
    out_ax = geometry.plot_vertices(verts, ax=ax, show=False)
    assert out_ax is ax
    assert len(ax.lines) == 2
    assert ax.get_xlim() == (0, 0.1)
    assert ax.get_ylim() == (0, 0.2)
    plt.close(fig)
