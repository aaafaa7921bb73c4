# 7. app.py
# Ford Ka segmentation: demographic and psychographic k-means, tables, plots
# and the results workbook. Edit the parameters below between runs.

import os

from load_data import load_ford_data
from preprocess import (DEMOGRAPHIC_VARS, SHORT_QUESTIONS, combine, question_labels, question_list,
                        segment_factor, short_question_labels, standardize)
from explore import cross_table, frequency_table, summarize
from cluster import DEFAULT_SEED, centroid_table, scree, train_kmeans
from visualize import (plot_balloon, plot_boxplots, plot_clusters, plot_jitter_scatter, plot_pairs,
                       plot_parallel, plot_scree)
from export import results_sheets, write_results

DATA_PATH = os.environ.get("FORDKA_DATA", "FordKaData.xlsx")
OUTPUT_DIR = os.environ.get("FORDKA_OUTPUT", "output")

SEED = DEFAULT_SEED
K_DEMOGRAPHIC = 5   # try other values of k, see the scree plot
K_PSYCHOGRAPHIC = 3
SCREE_K = range(1, 11)
DEMOGRAPHIC_SCATTER = ('Age', 'FirstTimePurchase')
PSYCHOGRAPHIC_SCATTER = ('Q1', 'Q2')


def explore(ford, output_dir):
    structure, stats = summarize(ford)
    print(structure)
    print(stats.T)

    for col in ['Age', 'AgeCategory', 'ChildrenCategory', 'FirstTimePurchase', 'Gender',
                'IncomeCategory', 'MaritalStatus', 'NumberChildren', 'PreferenceGroup']:
        print(frequency_table(ford, col))
    print(cross_table(ford['FirstTimePurchase'], ford['IncomeCategory']))

    pair_vars = ['Age', 'Gender', 'FirstTimePurchase', 'IncomeCategory', 'MaritalStatus', 'NumberChildren']
    plot_pairs(ford, pair_vars, jittered=False, save_path=os.path.join(output_dir, "pairs.png"))
    plot_pairs(ford, pair_vars, random_state=SEED, save_path=os.path.join(output_dir, "pairs_jitter.png"))
    plot_boxplots(ford, question_list(), save_path=os.path.join(output_dir, "question_boxplots.png"))


def demographic_clusters(ford, ford_std, segments, output_dir):
    grpB = train_kmeans(ford_std[DEMOGRAPHIC_VARS], k=K_DEMOGRAPHIC, random_state=SEED)
    print(f"[INFO] Demographic k-means: k={K_DEMOGRAPHIC}, sizes={grpB.sizes.tolist()}, silhouette={grpB.score:.3f}")

    x, y = DEMOGRAPHIC_SCATTER
    plot_jitter_scatter(ford_std, grpB.labels, grpB.centers, x, y, random_state=SEED,
                        save_path=os.path.join(output_dir, "demographic_scatter.png"))

    table = cross_table(ford['PreferenceGroup'], grpB.labels, col_name='Cluster')
    print(table)
    plot_balloon(table, xlabel='Cluster', ylabel='PreferenceGroup',
                 save_path=os.path.join(output_dir, "demographic_balloon.png"))
    print(cross_table(segments['SegName'], grpB.labels, col_name='Cluster'))

    grpBcenter = centroid_table(grpB)
    print(grpBcenter.round(2))
    plot_parallel(grpBcenter, title="Demographic centroids",
                  save_path=os.path.join(output_dir, "demographic_parallel.html"))
    plot_pairs(ford_std, DEMOGRAPHIC_VARS, hue=grpB.labels, random_state=SEED,
               save_path=os.path.join(output_dir, "demographic_splom.png"))
    plot_clusters(ford_std[DEMOGRAPHIC_VARS], grpB.labels, title="Demographic segments",
                  save_path=os.path.join(output_dir, "demographic_pca.png"))
    return grpB


def psychographic_clusters(ford, ford_std, segments, labels, short_labels, output_dir):
    qlist = question_list()
    grpA = train_kmeans(ford_std[qlist], k=K_PSYCHOGRAPHIC, random_state=SEED)
    print(f"[INFO] Psychographic k-means: k={K_PSYCHOGRAPHIC}, sizes={grpA.sizes.tolist()}, silhouette={grpA.score:.3f}")

    x, y = PSYCHOGRAPHIC_SCATTER
    plot_jitter_scatter(ford_std, grpA.labels, grpA.centers, x, y,
                        xlabel=labels[qlist.index(x)], ylabel=labels[qlist.index(y)], random_state=SEED,
                        save_path=os.path.join(output_dir, "psychographic_scatter.png"))

    print(cross_table(ford['PreferenceGroup'], grpA.labels, col_name='Cluster'))
    print(cross_table(segments['SegName'], grpA.labels, col_name='Cluster'))

    grpAcenter = centroid_table(grpA, labels)
    print(grpAcenter.round(2))
    plot_parallel(grpAcenter, title="Psychographic centroids",
                  save_path=os.path.join(output_dir, "psychographic_parallel.html"))

    short = centroid_table(grpA).loc[question_list(SHORT_QUESTIONS)]
    short.index = short_labels
    plot_parallel(short, title="Psychographic centroids (short list)",
                  save_path=os.path.join(output_dir, "psychographic_parallel_short.html"))
    return grpA


def main(data_path=DATA_PATH, output_dir=OUTPUT_DIR):
    data = load_ford_data(data_path)
    if data is None:
        print("[ERROR] Data loading failed. Exiting.")
        return None
    os.makedirs(output_dir, exist_ok=True)

    ford = combine(data.demographics, data.psychographics)
    segments = segment_factor(data.segments)
    labels = question_labels(data.questions)
    short_labels = short_question_labels(data.questions)
    ford_std, _ = standardize(ford)

    explore(ford, output_dir)

    wss_demo = scree(ford_std[DEMOGRAPHIC_VARS], SCREE_K, random_state=SEED)
    plot_scree(wss_demo, title="Demographic scree plot", save_path=os.path.join(output_dir, "demographic_scree.png"))
    wss_psyc = scree(ford_std[question_list()], SCREE_K, random_state=SEED)
    plot_scree(wss_psyc, title="Psychographic scree plot", save_path=os.path.join(output_dir, "psychographic_scree.png"))

    grpB = demographic_clusters(ford, ford_std, segments, output_dir)
    grpA = psychographic_clusters(ford, ford_std, segments, labels, short_labels, output_dir)

    return write_results(results_sheets(grpA, grpB), os.path.join(output_dir, "FordKa_Results.xlsx"))


if __name__ == "__main__":
    main()
