# 3. explore.py

import numpy as np
import pandas as pd
from scipy.stats import kurtosis, median_abs_deviation, skew, trim_mean


def summarize(df):
    """
    Structure and descriptive statistics of a dataset.

    Parameters:
        df (pd.DataFrame): Survey variables.

    Returns:
        tuple: (structure table with dtype, non-null count and first values,
        pandas descriptive statistics)
    """
    structure = pd.DataFrame({
        'dtype': df.dtypes.astype(str),
        'non_null': df.notna().sum(),
        'first_values': [', '.join(str(v) for v in df[col].head(5).tolist()) for col in df.columns],
    })
    return structure, df.describe()


def frequency_table(df, column):
    table = df[column].value_counts().sort_index()
    table.index.name = column
    return table.rename('Count')


def cross_table(row, col, row_name=None, col_name=None):
    row = pd.Series(np.asarray(row), name=row_name or getattr(row, 'name', None) or 'row')
    col = pd.Series(np.asarray(col), name=col_name or getattr(col, 'name', None) or 'col')
    return pd.crosstab(row, col)


def describe(df):
    rows = {}
    for col in df.columns:
        x = df[col].dropna().to_numpy(dtype=float)
        n = len(x)
        sd = x.std(ddof=1) if n > 1 else np.nan
        rows[col] = {
            'n': n,
            'mean': x.mean(),
            'sd': sd,
            'median': np.median(x),
            'trimmed': trim_mean(x, 0.1),
            'mad': median_abs_deviation(x, scale='normal'),
            'min': x.min(),
            'max': x.max(),
            'range': x.max() - x.min(),
            # moments scaled by the sample sd (b1, b2 - 3)
            'skew': skew(x) * ((n - 1) / n) ** 1.5,
            'kurtosis': (kurtosis(x) + 3) * ((n - 1) / n) ** 2 - 3,
            'se': sd / np.sqrt(n),
        }
    return pd.DataFrame.from_dict(rows, orient='index')


def correlations(df, decimals=2):
    return df.corr().round(decimals)
