# 2. preprocess.py

import pandas as pd
from sklearn.preprocessing import StandardScaler

# PreferenceGroup is left out so it can be compared against the clusters
DEMOGRAPHIC_VARS = ['Age', 'ChildrenCategory', 'FirstTimePurchase', 'Gender',
                    'IncomeCategory', 'MaritalStatus', 'NumberChildren']

N_QUESTIONS = 62
SHORT_QUESTIONS = [30, 57, 53, 1, 4, 12]


def question_list(numbers=None):
    if numbers is None:
        numbers = range(1, N_QUESTIONS + 1)
    return [f"Q{n}" for n in numbers]


def question_labels(statements, width=30):
    """Number each statement ("12,I like ...") and truncate to `width` characters (None keeps it whole)."""
    return [f"{i},{statement}"[:width] for i, statement in enumerate(statements, start=1)]


def short_question_labels(statements, numbers=SHORT_QUESTIONS, width=30):
    labels = question_labels(statements, width)
    return [labels[n - 1] for n in numbers]


def combine(demographics, psychographics):
    return pd.concat([demographics.reset_index(drop=True), psychographics.reset_index(drop=True)], axis=1)


def standardize(df):
    """
    Z-score every column (mean 0, standard deviation 1).

    Parameters:
        df (pd.DataFrame): Numeric variables.

    Returns:
        tuple: (standardized DataFrame with the same index and columns, fitted StandardScaler)
    """
    scaler = StandardScaler()
    X_scaled = scaler.fit_transform(df)
    return pd.DataFrame(X_scaled, index=df.index, columns=df.columns), scaler


def segment_factor(segments):
    seg = segments.copy()
    seg['SegName'] = seg['SegmentName'].astype('category')
    return seg.drop(columns=['SegmentName'])
