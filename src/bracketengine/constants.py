# Bracket Engine
# Copyright (C) 2025  Bracket Engine developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import re

SAVE_FILE_EXTENSION = ".json"

# Bracket stages, in progression order
ROUND_R32 = "R32"
ROUND_R16 = "R16"
ROUND_QF = "QF"
ROUND_SF = "SF"
ROUND_F = "F"

ROUND_ORDER = (ROUND_R32, ROUND_R16, ROUND_QF, ROUND_SF, ROUND_F)
ROUND_RANK = {code: rank for rank, code in enumerate(ROUND_ORDER)}
FIRST_ROUND = ROUND_ORDER[0]
FINAL_ROUND = ROUND_ORDER[-1]

ROUND_NAMES = {
    ROUND_R32: "Seizièmes de finale",
    ROUND_R16: "Huitièmes de finale",
    ROUND_QF: "Quarts de finale",
    ROUND_SF: "Demi-finales",
    ROUND_F: "Finale",
}

# Player statuses
PLAYER_PENDING = "EN_ATTENTE"
PLAYER_QUALIFIED = "QUALIFIE"
PLAYER_ELIMINATED = "ELIMINE"
PLAYER_STATUSES = (PLAYER_PENDING, PLAYER_QUALIFIED, PLAYER_ELIMINATED)

PLAYER_STATUS_LABELS = {
    PLAYER_QUALIFIED: "QUALIFIÉ",
    PLAYER_ELIMINATED: "ÉLIMINÉ",
    PLAYER_PENDING: "EN ATTENTE",
}

# Match statuses
MATCH_TO_PLAY = "A_JOUER"
MATCH_COMPLETED = "TERMINE"

# History entry types
HISTORY_MATCH_VALIDATE = "MATCH_VALIDATE"
HISTORY_ROUND_GENERATE = "ROUND_GENERATE"

DEFAULT_ACTOR = "Admin"

# Default tournament configuration
DEFAULT_TOURNAMENT_NAME = "LES ÉLITES EFOOTPRO"
DEFAULT_MODE = "Élimination directe"
DEFAULT_RULES: tuple = ()

# Engine-generated match ids: "m" + zero-padded sequence number
MATCH_ID_PREFIX = "m"
MATCH_ID_MIN_DIGITS = 2

# Proof links must point straight at an image file
PROOF_URL_PATTERN = re.compile(r"\.(png|jpg|jpeg|webp)(\?.*)?$", re.IGNORECASE)

# Storage and remote source defaults
DEFAULT_DATA_FILE = "tournament_data.json"
DEFAULT_REMOTE_URL = "http://localhost:8000/data.json"
DEFAULT_REMOTE_TIMEOUT = 10.0
CACHE_BUSTING_PARAM = "ts"

ENV_DATA_FILE = "BRACKETENGINE_DATA_FILE"
ENV_REMOTE_URL = "BRACKETENGINE_REMOTE_URL"
