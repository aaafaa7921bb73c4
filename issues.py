# 8. issues.py
# How scaling, seeds and starting points change the k-means segments, plus
# clustering the questions and hierarchical clustering.

import os

from load_data import load_ford_data
from preprocess import DEMOGRAPHIC_VARS, combine, question_labels, question_list, standardize
from explore import correlations, describe
from cluster import (DEFAULT_SEED, centroid_table, cluster_questions, compare_assignments, cut_hierarchy,
                     hierarchical, train_hierarchical, train_kmeans)
from visualize import plot_dendrogram, plot_heatmap, plot_parallel

DATA_PATH = os.environ.get("FORDKA_DATA", "FordKaData.xlsx")
OUTPUT_DIR = os.environ.get("FORDKA_OUTPUT", "output")

SEED = DEFAULT_SEED
SECOND_SEED = 5682991
QUESTION_SEED = 44328
K = 3
K_QUESTIONS = 6
LINKAGE = "complete"


def scaling(ford, ford_std, output_dir):
    print(describe(ford_std[DEMOGRAPHIC_VARS]).round(2))
    print(describe(ford[DEMOGRAPHIC_VARS]).round(2))
    print(correlations(ford[DEMOGRAPHIC_VARS]))
    print(correlations(ford_std[DEMOGRAPHIC_VARS]))

    grpA = train_kmeans(ford[DEMOGRAPHIC_VARS], k=K, random_state=SEED)
    grpB = train_kmeans(ford_std[DEMOGRAPHIC_VARS], k=K, random_state=SEED)

    for name, result in [("Unscaled", grpA), ("Scaled", grpB)]:
        print(f"[INFO] {name} demographic k-means: silhouette={result.score:.3f}")
        table = centroid_table(result)
        print(table.round(2))
        plot_parallel(table, title=name, save_path=os.path.join(output_dir, f"{name.lower()}_parallel.png"))

    print(compare_assignments(grpA.labels, grpB.labels, names=("Unscaled", "Scaled")))


def starting_points(ford_std, output_dir):
    X = ford_std[DEMOGRAPHIC_VARS]
    grpA1 = train_kmeans(X, k=K, random_state=SEED)
    grpA2 = train_kmeans(X, k=K, random_state=SECOND_SEED)
    # first K respondents as the starting centers
    grpA3 = train_kmeans(X, init=X.iloc[:K])

    for name, result in [("seed1", grpA1), ("seed2", grpA2), ("first_points", grpA3)]:
        table = centroid_table(result)
        print(table.round(2))
        plot_parallel(table, title=name, save_path=os.path.join(output_dir, f"start_{name}_parallel.png"))

    print(compare_assignments(grpA1.labels, grpA2.labels, names=("Seed 1", "Seed 2")))
    print(compare_assignments(grpA3.labels, grpA1.labels, names=("First points", "Seed 1")))
    print(compare_assignments(grpA3.labels, grpA2.labels, names=("First points", "Seed 2")))


def questions(ford, statements):
    labels = question_labels(statements, width=None)
    _, groups = cluster_questions(ford[question_list()], labels, k=K_QUESTIONS, random_state=QUESTION_SEED)
    for cluster, members in groups.items():
        print(f"\nCluster # {cluster}")
        for member in members:
            print(member)


def hierarchy(ford, ford_std, statements, output_dir):
    qford = ford[question_list()].T
    grphQ = hierarchical(qford, method=LINKAGE)
    plot_dendrogram(grphQ, labels=question_labels(statements, width=40), title="Questions",
                    save_path=os.path.join(output_dir, "questions_dendrogram.png"))

    grphP = hierarchical(ford_std[question_list()], method=LINKAGE)
    plot_dendrogram(grphP, title="Respondents", save_path=os.path.join(output_dir, "respondents_dendrogram.png"))
    _, agglomerative, score = train_hierarchical(ford_std[question_list()], k=K, method=LINKAGE)
    print(f"[INFO] Hierarchical ({LINKAGE}) respondent clusters: silhouette={score:.3f}")
    print(compare_assignments(cut_hierarchy(grphP, K), agglomerative, names=("Tree cut", "Agglomerative")))

    plot_heatmap(ford_std[question_list()], method=LINKAGE, save_path=os.path.join(output_dir, "heatmap.png"))


def main(data_path=DATA_PATH, output_dir=OUTPUT_DIR):
    data = load_ford_data(data_path)
    if data is None:
        print("[ERROR] Data loading failed. Exiting.")
        return
    os.makedirs(output_dir, exist_ok=True)

    ford = combine(data.demographics, data.psychographics)
    ford_std, _ = standardize(ford)

    scaling(ford, ford_std, output_dir)
    starting_points(ford_std, output_dir)
    questions(ford, data.questions)
    hierarchy(ford, ford_std, data.questions, output_dir)
    print("[INFO] Analysis completed")


if __name__ == "__main__":
    main()
