"""
Tests for export module.
"""
import pandas as pd
import pytest

from cluster import train_kmeans
from export import assignment_table, results_sheets, write_results
from preprocess import DEMOGRAPHIC_VARS, combine, question_list, standardize


def test_assignment_table():
    """Test that respondents are numbered from 1."""
    table = assignment_table([2, 1, 3])

    assert list(table.index) == [1, 2, 3]
    assert table.index.name == 'Respondent'
    assert table['Cluster'].tolist() == [2, 1, 3]


def test_write_results_standard_sheets(tmp_path, survey):
    """Test the results workbook sheets, row names and values."""
    demo, psyc, _, _ = survey
    ford_std, _ = standardize(combine(demo, psyc))
    grpA = train_kmeans(ford_std[question_list()], k=3)
    grpB = train_kmeans(ford_std[DEMOGRAPHIC_VARS], k=5)

    path = write_results(results_sheets(grpA, grpB), tmp_path / "FordKa_Results.xlsx")
    sheets = pd.read_excel(path, sheet_name=None, index_col=0)

    assert list(sheets) == ['A Centroids', 'A Assignment', 'B Centroids', 'B Assignment']
    assert sheets['A Centroids'].shape == (3, 62)
    assert list(sheets['B Centroids'].columns) == DEMOGRAPHIC_VARS
    assert sheets['B Assignment']['Cluster'].tolist() == grpB.labels.tolist()
    assert list(sheets['A Assignment'].index) == list(range(1, len(demo) + 1))


def test_write_results_overwrites(tmp_path):
    """Test that an existing workbook is replaced."""
    path = tmp_path / "out.xlsx"
    write_results({'First': pd.DataFrame({'a': [1]})}, path)
    write_results({'Second': pd.DataFrame({'b': [2]})}, path)

    assert list(pd.read_excel(path, sheet_name=None)) == ['Second']


def test_write_results_sheet_name_too_long(tmp_path):
    """Test that Excel's sheet name limit is enforced."""
    with pytest.raises(ValueError, match="31"):
        write_results({'x' * 32: pd.DataFrame({'a': [1]})}, tmp_path / "out.xlsx")
