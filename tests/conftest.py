import matplotlib

matplotlib.use("Agg")

import pytest

from survey_data import make_survey, write_workbook


@pytest.fixture
def survey():
    return make_survey()


@pytest.fixture
def workbook(tmp_path, survey):
    return write_workbook(tmp_path / "FordKaData.xlsx", *survey)
