"""Constantes compartilhadas (colunas do log, limiares e renderização)."""

from pm4py.util import constants as pm_constants
from pm4py.util import xes_constants

# Colunas no formato pm4py/XES
PM_CASE_KEY: str = pm_constants.CASE_CONCEPT_NAME
PM_ACTIVITY_KEY: str = xes_constants.DEFAULT_NAME_KEY
PM_TIMESTAMP_KEY: str = xes_constants.DEFAULT_TIMESTAMP_KEY
PM_LIFECYCLE_KEY: str = xes_constants.DEFAULT_TRANSITION_KEY

# Colunas do domínio (logs carregados sem pm4py.format_dataframe)
COLUMN_CASE_ID = "CASE_ID"
COLUMN_ACTIVITY = "ACTIVITY"
COLUMN_START_TS = "START_TIMESTAMP"
COLUMN_END_TS = "END_TIMESTAMP"
COLUMN_LIFECYCLE = "LIFECYCLE"

LIFECYCLE_COMPLETE = "complete"

# Análise de dependências
DEFAULT_THRESHOLD = 1.0

# Grade de dependências
GRID_CELL_WIDTH = 15
DEPENDENCY_LABEL_WIDTH = 10
NOT_APPLICABLE = "n/a"
NO_DEPENDENCY = "None"
MISSING_PART = "-"

# Autômato de prefixos
CASE_ID_PREFIX = "case_"
