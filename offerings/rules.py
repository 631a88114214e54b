"""
Deterministic selection and display rules.

Column labels are written exactly as they appear in the published sheet;
lookup keys are derived from them through `normalize_header`.
"""

PLACEHOLDER = "—"
UNNAMED_PROGRAM = "PROGRAMA SIN NOMBRE"
NO_OFFERINGS_MESSAGE = "No hay fichas vigentes."

OPEN_OFFER_TOKEN = "abierta"
OPEN_MATCH_EXACT = "exact"
OPEN_MATCH_CONTAINS = "contains"

ENROLLMENT_URL_TEMPLATE = "https://betowa.sena.edu.co/oferta?search={ficha}"

FIELD_LABELS = {
    "program": "NOMBRE DEL PROGRAMA DE FORMACIÓN",
    "start": "FECHA DE INICIO DE LA FORMACIÓN",
    "end": "FECHA DE FINALIZACIÓN DE LA FORMACIÓN",
    "ficha": "Número de ficha",
    "closing": "Fecha de cierre inscripción",
    "offer_type": "Tipo de oferta",
    "start_time": "HORARIO DE INICIO",
    "end_time": "HORA FINAL",
    "environment": "AMBIENTE DE FORMACIÓN",
    "schedule": "LUNES, MIERCOLES, VIERNES ",
}
