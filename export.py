# 6. export.py

import pandas as pd

MAX_SHEET_NAME = 31


def assignment_table(labels):
    index = pd.RangeIndex(1, len(labels) + 1, name='Respondent')
    return pd.DataFrame({'Cluster': labels}, index=index)


def results_sheets(psychographic, demographic):
    """
    Standard result tables: centroids and assignments for the psychographic (A)
    and demographic (B) k-means solutions.

    Parameters:
        psychographic (cluster.KMeansResult): Solution on Q1..Q62.
        demographic (cluster.KMeansResult): Solution on the demographic variables.

    Returns:
        dict: sheet name -> DataFrame.
    """
    return {
        'A Centroids': psychographic.centers,
        'A Assignment': assignment_table(psychographic.labels),
        'B Centroids': demographic.centers,
        'B Assignment': assignment_table(demographic.labels),
    }


def write_results(sheets, output_path="FordKa_Results.xlsx"):
    """
    Write each table to its own sheet, with row and column names. Overwrites the file.

    Parameters:
        sheets (dict): sheet name -> DataFrame or Series.
        output_path (str): Workbook path.

    Returns:
        str: The path written.
    """
    too_long = [name for name in sheets if len(name) > MAX_SHEET_NAME]
    if too_long:
        raise ValueError(f"[ERROR] Sheet names longer than {MAX_SHEET_NAME} characters: {too_long}")

    with pd.ExcelWriter(output_path, engine="openpyxl", mode="w") as writer:
        for name, table in sheets.items():
            table.to_excel(writer, sheet_name=name, index=True, header=True)

    print(f"[INFO] Results saved to: {output_path}")
    return output_path
