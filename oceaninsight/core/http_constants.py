"""Constantes HTTP et métier pour éviter les valeurs magiques dans le code.

Ce module regroupe les codes de statut utilisés par les routes et les bornes fixes des requêtes
envoyées aux sources amont.
"""

# Codes de statut HTTP courants
HTTP_OK = 200
HTTP_SEE_OTHER = 303
HTTP_BAD_REQUEST = 400
HTTP_NOT_FOUND = 404

# Bornes des réponses amont
DEFAULT_BBOX_HALF_WIDTH_DEG = 0.25
DEFAULT_OBIS_SIZE = 100
DEFAULT_GBIF_LIMIT = 100

# Bornes d'affichage
MAX_DETAIL_ROWS = 20
TOP_K = 3
SAMPLE_SIZE = 5
