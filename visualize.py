# 5. visualize.py

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import plotly.express as px
import seaborn as sns
from scipy.cluster.hierarchy import dendrogram
from sklearn.decomposition import PCA


def _finish(save_path, fig=None):
    target = fig if fig is not None else plt
    if save_path:
        target.savefig(save_path, dpi=300)
        print(f"[INFO] Plot saved to: {save_path}")
        plt.close('all')
    else:
        plt.show()


def jitter(values, amount=None, random_state=None):
    """
    Add uniform noise so overlapping categorical answers become visible.

    The default amount follows R's jitter: a fifth of the smallest gap between
    distinct values, or |x| / 50 for a constant column (0.02 when it is zero).
    """
    rng = np.random.default_rng(random_state)
    x = np.asarray(values, dtype=float)
    if amount is None:
        distinct = np.unique(np.round(x, 3))
        gaps = np.diff(distinct)
        if len(gaps):
            amount = gaps.min() / 5
        elif len(distinct) and distinct[0] != 0:
            amount = abs(distinct[0]) / 50
        else:
            amount = 1 / 50
    return x + rng.uniform(-amount, amount, size=x.shape)


def plot_clusters(X_scaled, labels, title='Ford Ka Segments (KMeans)', save_path=None):
    """
    Plot clusters using PCA-reduced 2D representation.

    Parameters:
        X_scaled (np.ndarray): Scaled feature array.
        labels (list or np.ndarray): Cluster labels.
        title (str): Plot title.
        save_path (str): Optional path to save the plot. If None, displays the plot.
    """
    pca = PCA(n_components=2)
    components = pca.fit_transform(np.asarray(X_scaled, dtype=float))
    df_plot = pd.DataFrame(data=components, columns=['PC1', 'PC2'])
    df_plot['Cluster'] = np.asarray(labels).astype(str)

    plt.figure(figsize=(8, 6))
    sns.scatterplot(x='PC1', y='PC2', hue='Cluster', data=df_plot, palette='Set2', s=50)
    plt.title(title)
    plt.xlabel('Principal Component 1')
    plt.ylabel('Principal Component 2')
    plt.tight_layout()
    _finish(save_path)


def plot_jitter_scatter(X, labels, centers, x, y, xlabel=None, ylabel=None, random_state=None, save_path=None):
    """
    Jittered scatter of two variables coloured by cluster, with the centroids as stars.

    Parameters:
        X (pd.DataFrame): Standardized data containing columns `x` and `y`.
        labels (np.ndarray): 1-based cluster labels.
        centers (pd.DataFrame): Cluster centers (clusters x variables).
        x, y (str): Variables to plot.
        xlabel, ylabel (str): Axis labels, default to the variable names.
        random_state (int): Seed for the jitter.
        save_path (str): Optional path to save the plot. If None, displays the plot.
    """
    palette = sns.color_palette('tab10', n_colors=len(centers))
    colors = [palette[label - 1] for label in labels]
    rng = np.random.default_rng(random_state)

    plt.figure(figsize=(8, 6))
    plt.scatter(jitter(X[x], random_state=rng), jitter(X[y], random_state=rng),
                c=colors, s=15, alpha=0.7)
    for i, cluster in enumerate(centers.index):
        plt.scatter(centers.loc[cluster, x], centers.loc[cluster, y], marker='*', s=300,
                    color=palette[i], edgecolor='black', label=str(cluster))
    plt.legend(title='Cluster', loc='upper left', frameon=False)
    plt.xlabel(xlabel or x)
    plt.ylabel(ylabel or y)
    plt.tight_layout()
    _finish(save_path)


def plot_boxplots(df, columns, per_panel=10, save_path=None):
    panels = [columns[i:i + per_panel] for i in range(0, len(columns), per_panel)]
    fig, axes = plt.subplots(len(panels), 1, figsize=(10, 2.5 * len(panels)), squeeze=False)
    for ax, cols in zip(axes[:, 0], panels):
        df[cols].boxplot(ax=ax, grid=False)
    fig.tight_layout()
    _finish(save_path, fig)


def plot_pairs(df, columns, hue=None, jittered=True, random_state=None, save_path=None):
    data = df[columns].astype(float)
    if jittered:
        rng = np.random.default_rng(random_state)
        data = data.apply(lambda col: jitter(col, random_state=rng))
    if hue is not None:
        data = data.assign(Cluster=np.asarray(hue).astype(str))
        grid = sns.pairplot(data, vars=columns, hue='Cluster', palette='tab10',
                            plot_kws={'s': 10, 'alpha': 0.6}, corner=True)
    else:
        grid = sns.pairplot(data, vars=columns, plot_kws={'s': 10, 'alpha': 0.6}, corner=True)
    _finish(save_path, grid)


def plot_balloon(table, xlabel=None, ylabel=None, save_path=None):
    counts = table.to_numpy(dtype=float)
    cols, rows = np.meshgrid(np.arange(table.shape[1]), np.arange(table.shape[0]))
    sizes = 2000 * counts / counts.max() if counts.max() > 0 else counts

    plt.figure(figsize=(1.2 * table.shape[1] + 3, 0.8 * table.shape[0] + 2))
    plt.scatter(cols.ravel(), rows.ravel(), s=sizes.ravel(), color='steelblue', alpha=0.6)
    for r, c, n in zip(rows.ravel(), cols.ravel(), counts.ravel()):
        plt.text(c, r, int(n), ha='center', va='center', fontsize=9)
    plt.xticks(range(table.shape[1]), [str(c) for c in table.columns])
    plt.yticks(range(table.shape[0]), [str(r) for r in table.index])
    plt.xlabel(xlabel or table.columns.name or '')
    plt.ylabel(ylabel or table.index.name or '')
    plt.margins(0.3)
    plt.tight_layout()
    _finish(save_path)


def plot_parallel(centroids, title=None, save_path=None):
    """
    Parallel plot of cluster centroids: one line per cluster across the variables.

    Parameters:
        centroids (pd.DataFrame): Variables in rows, clusters in columns (see cluster.centroid_table).
        title (str): Plot title.
        save_path (str): ".html" writes an interactive Plotly parallel-coordinates chart with its own
            axis per variable, anything else a static image.
            If None, displays the plot.
    """
    if save_path and str(save_path).endswith('.html'):
        # one row per cluster, one axis per variable
        wide = centroids.T.reset_index(drop=True)
        wide.columns = [str(col) for col in wide.columns]
        dimensions = list(wide.columns)
        wide['Cluster'] = np.arange(1, len(wide) + 1)
        fig = px.parallel_coordinates(wide, dimensions=dimensions, color='Cluster', title=title)
        fig.write_html(save_path)
        print(f"[INFO] Plot saved to: {save_path}")
        return

    positions = np.arange(len(centroids))
    plt.figure(figsize=(max(8, 0.35 * len(centroids)), 6))
    for cluster in centroids.columns:
        plt.plot(positions, centroids[cluster].values, marker='o', label=str(cluster))
    plt.xticks(positions, centroids.index, rotation=90, fontsize=7)
    plt.legend(title='Cluster', loc='upper center', ncol=len(centroids.columns), frameon=False)
    if title:
        plt.title(title)
    plt.tight_layout()
    _finish(save_path)


def plot_scree(wss, title='Scree plot', save_path=None):
    plt.figure(figsize=(7, 5))
    plt.plot(wss.index, wss['wss'], marker='o')
    plt.xlabel('Number of clusters (k)')
    plt.ylabel('Within-cluster sum of squares')
    plt.title(title)
    plt.tight_layout()
    _finish(save_path)


def plot_dendrogram(Z, labels=None, title=None, save_path=None):
    plt.figure(figsize=(14, 7))
    dendrogram(Z, labels=labels, leaf_font_size=7)
    if title:
        plt.title(title)
    plt.tight_layout()
    _finish(save_path)


def plot_heatmap(X, method='complete', save_path=None):
    # data is already standardized, so no extra scaling; columns keep their order
    grid = sns.clustermap(pd.DataFrame(X), method=method, col_cluster=False, cmap='RdYlBu_r',
                          yticklabels=False, figsize=(12, 10))
    _finish(save_path, grid)
