# 1. load_data.py

import os
from collections import namedtuple

import pandas as pd

DEMOGRAPHIC_SHEET = "Demographic Data"
PSYCHOGRAPHIC_SHEET = "Psychographic Data"
QUESTIONNAIRE_SHEET = "Psychographic questionnaire"

# header sits on worksheet row 7 (zero-based 6)
HEADER_ROW = 6

DEMOGRAPHIC_COLUMNS = ['Age', 'AgeCategory', 'ChildrenCategory', 'FirstTimePurchase', 'Gender',
                       'IncomeCategory', 'MaritalStatus', 'NumberChildren', 'PreferenceGroup']
QUESTION_COLUMNS = [f"Q{i}" for i in range(1, 63)]

FordData = namedtuple('FordData', ['demographics', 'psychographics', 'questions', 'segments'])


def _check_columns(df, required, what):
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise ValueError(f"[ERROR] Missing required {what} columns: {missing}")


def _read_block(filepath, sheet, usecols):
    df = pd.read_excel(filepath, sheet_name=sheet, header=HEADER_ROW, usecols=usecols)
    df = df.dropna(how='all').reset_index(drop=True)
    df.columns = [str(col).strip() for col in df.columns]
    return df


def _bundle(demo, psyc, quest, seg):
    _check_columns(demo, DEMOGRAPHIC_COLUMNS, "demographic")
    _check_columns(psyc, QUESTION_COLUMNS, "psychographic")
    _check_columns(quest, ['Statement'], "questionnaire")
    _check_columns(seg, ['SegmentName'], "segment")

    if len(demo) != len(psyc):
        raise ValueError(f"[ERROR] Demographic ({len(demo)}) and psychographic ({len(psyc)}) row counts differ")
    if len(quest) != len(QUESTION_COLUMNS):
        raise ValueError(f"[ERROR] Expected {len(QUESTION_COLUMNS)} questionnaire statements, found {len(quest)}")

    return FordData(
        demographics=demo[DEMOGRAPHIC_COLUMNS],
        psychographics=psyc[QUESTION_COLUMNS],
        questions=quest['Statement'].astype(str).str.strip().tolist(),
        segments=seg,
    )


def load_ford_data(filepath="FordKaData.xlsx"):
    """
    Load the Ford Ka survey workbook.

    Parameters:
        filepath (str): Path to FordKaData.xlsx.

    Returns:
        FordData: demographics, psychographics, question statements and Ford's
        own segments, or None when the file cannot be found.
    """
    try:
        demo = _read_block(filepath, DEMOGRAPHIC_SHEET, "B:J")
        psyc = _read_block(filepath, PSYCHOGRAPHIC_SHEET, "B:BK")
        quest = _read_block(filepath, QUESTIONNAIRE_SHEET, "B")
        seg = _read_block(filepath, DEMOGRAPHIC_SHEET, "K:L")
    except FileNotFoundError:
        print(f"[ERROR] File not found: {filepath}. Please check the path.")
        return None

    data = _bundle(demo, psyc, quest, seg)
    print(f"[INFO] Loaded {len(data.demographics)} respondents, "
          f"{data.demographics.shape[1]} demographic and {data.psychographics.shape[1]} psychographic variables")
    return data


def load_ford_csv(folder="."):
    # CSV exports of the same workbook, for machines without an Excel reader
    try:
        demo = pd.read_csv(os.path.join(folder, "FordKaDemographicData.csv"), index_col=0)
        psyc = pd.read_csv(os.path.join(folder, "FordKaPsychographicData.csv"), index_col=0)
        with open(os.path.join(folder, "FordKaQuestions.txt"), encoding="utf-8") as f:
            statements = [line.strip() for line in f if line.strip()]
        seg = pd.read_csv(os.path.join(folder, "FordKaSegmentData.csv"))
    except FileNotFoundError as e:
        print(f"[ERROR] File not found: {e.filename}. Please check the path.")
        return None

    demo = demo.reset_index(drop=True)
    psyc = psyc.reset_index(drop=True)
    quest = pd.DataFrame({'Statement': statements})
    data = _bundle(demo, psyc, quest, seg)
    print(f"[INFO] Loaded {len(data.demographics)} respondents from CSV files in {folder}")
    return data
