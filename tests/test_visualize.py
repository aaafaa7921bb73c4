"""
Tests for visualize module. Plots are written to a temporary folder.
"""
import numpy as np
import pandas as pd

from cluster import centroid_table, hierarchical, scree, train_kmeans
from explore import cross_table
from preprocess import DEMOGRAPHIC_VARS, combine, question_list, standardize
from visualize import (jitter, plot_balloon, plot_boxplots, plot_clusters, plot_dendrogram, plot_heatmap,
                       plot_jitter_scatter, plot_pairs, plot_parallel, plot_scree)


def _standardized(survey):
    demo, psyc, _, _ = survey
    ford_std, _ = standardize(combine(demo, psyc))
    return ford_std


def test_jitter_small_noise():
    """Test that jitter stays within a fifth of the smallest gap."""
    x = np.array([1, 2, 2, 3, 1], dtype=float)
    jittered = jitter(x, random_state=0)

    assert jittered.shape == x.shape
    assert np.all(np.abs(jittered - x) <= 0.2)
    assert not np.array_equal(jittered, x)


def test_jitter_constant_column():
    """Test that a constant column gets noise of |x| / 50, or 0.02 around zero."""
    fives = jitter(np.full(4, 5.0), random_state=0)
    zeros = jitter(np.zeros(4), random_state=0)

    assert np.all(np.abs(fives - 5) <= 0.1)
    assert np.all(np.abs(zeros) <= 0.02)
    assert not np.array_equal(zeros, np.zeros(4))


def test_plot_jitter_scatter_and_pca(tmp_path, survey):
    """Test the scatter with centroids and the PCA plot."""
    ford_std = _standardized(survey)
    result = train_kmeans(ford_std[DEMOGRAPHIC_VARS], k=3)

    plot_jitter_scatter(ford_std, result.labels, result.centers, 'Age', 'FirstTimePurchase',
                        random_state=1, save_path=tmp_path / "scatter.png")
    plot_clusters(ford_std[DEMOGRAPHIC_VARS], result.labels, save_path=tmp_path / "pca.png")

    assert (tmp_path / "scatter.png").stat().st_size > 0
    assert (tmp_path / "pca.png").stat().st_size > 0


def test_plot_parallel_html_and_png(tmp_path, survey):
    """Test that the parallel plot writes Plotly HTML or a static image by suffix."""
    ford_std = _standardized(survey)
    table = centroid_table(train_kmeans(ford_std[question_list()], k=3))

    plot_parallel(table, title="Centroids", save_path=str(tmp_path / "parallel.html"))
    plot_parallel(table, title="Centroids", save_path=tmp_path / "parallel.png")

    html = (tmp_path / "parallel.html").read_text(encoding="utf-8")
    assert "parcoords" in html
    assert "Q62" in html
    assert (tmp_path / "parallel.png").stat().st_size > 0


def test_plot_balloon(tmp_path):
    """Test the balloon plot of a cross-tab, including empty cells."""
    table = cross_table(pd.Series([1, 1, 2, 3], name='PreferenceGroup'), np.array([1, 2, 2, 2]), col_name='Cluster')
    plot_balloon(table, save_path=tmp_path / "balloon.png")

    assert (tmp_path / "balloon.png").exists()


def test_plot_boxplots_and_pairs(tmp_path, survey):
    """Test the question boxplots and the jittered pair plot."""
    demo, psyc, _, _ = survey
    ford = combine(demo, psyc)

    plot_boxplots(ford, question_list(), save_path=tmp_path / "box.png")
    plot_pairs(ford, ['Age', 'Gender', 'IncomeCategory'], random_state=2, save_path=tmp_path / "pairs.png")
    plot_pairs(ford, ['Age', 'Gender'], hue=np.repeat([1, 2, 3], 15), save_path=tmp_path / "splom.png")

    for name in ["box.png", "pairs.png", "splom.png"]:
        assert (tmp_path / name).exists()


def test_plot_scree_dendrogram_heatmap(tmp_path, survey):
    """Test the scree plot, dendrogram and heatmap."""
    ford_std = _standardized(survey)
    X = ford_std[question_list()]

    plot_scree(scree(ford_std[DEMOGRAPHIC_VARS], range(1, 5)), save_path=tmp_path / "scree.png")
    plot_dendrogram(hierarchical(X), save_path=tmp_path / "dendrogram.png")
    plot_heatmap(X, save_path=tmp_path / "heatmap.png")

    for name in ["scree.png", "dendrogram.png", "heatmap.png"]:
        assert (tmp_path / name).exists()
