import pandas as pd
import pytest


SAMPLE_TRACES = [
    ["A", "B", "C", "D"],
    ["A", "C", "B", "D"],
    ["A", "E", "D"],
    ["A", "D"],
]


@pytest.fixture
def sample_traces():
    return [list(trace) for trace in SAMPLE_TRACES]


@pytest.fixture
def noisy_traces():
    # O último trace não contém D.
    return [list(trace) for trace in SAMPLE_TRACES] + [["A", "C"]]


@pytest.fixture
def domain_log_df():
    """Log com colunas do domínio, fora de ordem e com ciclo de vida."""
    return pd.DataFrame(
        {
            "CASE_ID": ["c2", "c1", "c1", "c1", "c2", "c1"],
            "ACTIVITY": ["X", "B", "A", "A", "Y", "C"],
            "END_TIMESTAMP": [
                "2024-01-02 09:00:00",
                "2024-01-01 10:00:00",
                "2024-01-01 09:00:00",
                "2024-01-01 08:00:00",
                "2024-01-02 08:00:00",
                "2024-01-01 11:00:00",
            ],
            "LIFECYCLE": ["start", "complete", "complete", "start", "start", "complete"],
        }
    )
