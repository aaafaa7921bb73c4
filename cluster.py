# 4. cluster.py

from collections import namedtuple

import numpy as np
import pandas as pd
from scipy.cluster.hierarchy import fcluster, linkage
from sklearn.cluster import AgglomerativeClustering, KMeans
from sklearn.metrics import silhouette_score

DEFAULT_SEED = 1248765792

# labels are numbered 1..k
KMeansResult = namedtuple('KMeansResult', ['model', 'labels', 'score', 'centers', 'sizes'])


def _silhouette(X, labels):
    n_labels = len(set(labels))
    if n_labels < 2 or n_labels >= len(labels):
        return np.nan
    return silhouette_score(X, labels)


def _columns(X):
    if isinstance(X, pd.DataFrame):
        return list(X.columns)
    return [f"V{i}" for i in range(1, np.shape(X)[1] + 1)]


def train_kmeans(X, k=3, random_state=DEFAULT_SEED, init="k-means++", n_init=10):
    """
    Fit k-means and collect what the reports need.

    Parameters:
        X (pd.DataFrame or np.ndarray): Observations in rows.
        k (int): Number of clusters. Ignored when `init` holds explicit centers.
        random_state (int): Seed, so reruns give the same solution.
        init (str or array-like): "k-means++", "random" or explicit starting centers.
        n_init (int): Number of restarts. Explicit centers always run once.

    Returns:
        KMeansResult: fitted model, 1-based labels, silhouette score,
        centers (clusters x variables) and cluster sizes.
    """
    columns = _columns(X)
    values = np.asarray(X, dtype=float)

    if not isinstance(init, str):
        init = np.asarray(init, dtype=float)
        k = init.shape[0]
        n_init = 1

    model = KMeans(n_clusters=k, init=init, n_init=n_init, random_state=random_state)
    labels = model.fit_predict(values) + 1
    score = _silhouette(values, labels)

    cluster_ids = pd.Index(range(1, k + 1), name='Cluster')
    centers = pd.DataFrame(model.cluster_centers_, index=cluster_ids, columns=columns)
    sizes = pd.Series(labels).value_counts().reindex(cluster_ids, fill_value=0).rename('Size')
    return KMeansResult(model, labels, score, centers, sizes)


def centroid_table(result, labels=None):
    """Transpose the centers so each row is a variable and each column a cluster."""
    table = result.centers.T
    if labels is not None:
        if len(labels) != len(table):
            raise ValueError(f"[ERROR] Got {len(labels)} labels for {len(table)} variables")
        table.index = list(labels)
    return table


def compare_assignments(a, b, names=("A", "B")):
    return pd.crosstab(pd.Series(np.asarray(a), name=names[0]),
                       pd.Series(np.asarray(b), name=names[1]))


def scree(X, k_values=range(1, 11), random_state=DEFAULT_SEED):
    rows = []
    for k in k_values:
        result = train_kmeans(X, k=k, random_state=random_state)
        rows.append({'k': k, 'wss': result.model.inertia_, 'silhouette': result.score})
    return pd.DataFrame(rows).set_index('k')


def cluster_questions(psychographics, labels, k=6, random_state=44328):
    """
    Group the questions (not the respondents) by clustering the transposed answers.

    Returns:
        tuple: (KMeansResult, dict mapping cluster number to the question labels in it)
    """
    transposed = psychographics.T
    result = train_kmeans(transposed, k=k, random_state=random_state)
    groups = {c: [lab for lab, g in zip(labels, result.labels) if g == c] for c in range(1, k + 1)}
    return result, groups


def hierarchical(X, method="complete"):
    return linkage(np.asarray(X, dtype=float), method=method, metric='euclidean')


def cut_hierarchy(Z, k):
    return fcluster(Z, t=k, criterion='maxclust')


def train_hierarchical(X, k=3, method="complete"):
    values = np.asarray(X, dtype=float)
    model = AgglomerativeClustering(n_clusters=k, linkage=method)
    labels = model.fit_predict(values) + 1
    score = _silhouette(values, labels)
    return model, labels, score
