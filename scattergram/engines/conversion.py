"""
SAT / ACT score conversion.

Concordance tables between the 400-1600 SAT scale and the 1-36 ACT
composite. Conversion is always an explicit step applied to records before
aggregation; the engine never mixes scales on its own.
"""

from dataclasses import replace

from ..models import ApplicantRecord, ScoreScale


# =============================================================================
# CONCORDANCE TABLE
# =============================================================================
# ACT composite → inclusive SAT band. SAT → ACT uses the same bands, keyed on
# the SAT score divided by ten.

ACT_TO_SAT_BANDS = {
    36: (1570, 1600),
    35: (1530, 1560),
    34: (1490, 1520),
    33: (1450, 1480),
    32: (1420, 1440),
    31: (1390, 1410),
    30: (1360, 1380),
    29: (1330, 1350),
    28: (1300, 1320),
    27: (1260, 1290),
    26: (1230, 1250),
    25: (1200, 1220),
    24: (1160, 1190),
    23: (1130, 1150),
    22: (1100, 1120),
    21: (1060, 1090),
    20: (1030, 1050),
    19: (990, 1020),
    18: (960, 980),
    17: (920, 950),
    16: (880, 910),
    15: (830, 870),
    14: (780, 820),
    13: (730, 770),
    12: (690, 720),
    11: (650, 680),
    10: (620, 640),
    9: (590, 610),
}

# The SAT lookup works on tens (1300 → 130); the top band covers the whole
# 1570-1600 range and the bottom one starts at 590.
_SAT_TENS_TO_ACT = {
    tens: act
    for act, (low, high) in ACT_TO_SAT_BANDS.items()
    for tens in range(low // 10, high // 10 + 1)
}


def sat_to_act(sat: int) -> int:
    """
    Convert an SAT total to the equivalent ACT composite.

    Raises:
        ValueError: if the score is below 590 or above 1609
    """
    act = _SAT_TENS_TO_ACT.get(int(sat) // 10)
    if act is None:
        raise ValueError(f"SAT score {sat} is outside the concordance table")
    return act


def act_to_sat(act: int) -> range:
    """
    Convert an ACT composite to the inclusive band of equivalent SAT totals.

    Returns:
        range(low, high + 1), e.g. 28 → range(1300, 1321)

    Raises:
        ValueError: if the composite is not between 9 and 36
    """
    band = ACT_TO_SAT_BANDS.get(act)
    if band is None:
        raise ValueError(f"ACT composite {act} is outside the concordance table")
    low, high = band
    return range(low, high + 1)


def to_act_record(record: ApplicantRecord) -> ApplicantRecord:
    """
    Re-express a SAT-scale record on the ACT scale.

    Records already on the ACT scale are returned unchanged. A missing score
    stays missing.
    """
    if record.test_scale == ScoreScale.ACT:
        return record
    score = sat_to_act(record.test_score) if record.test_score is not None else None
    return replace(record, test_score=score, test_scale=ScoreScale.ACT)
