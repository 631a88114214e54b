import pytest

from offerings.config import Settings
from offerings.normalize import FIELD_KEYS

FEED_CSV = (
    "Nombre del Programa de Formacion,Fecha de inicio de la formación,"
    "FECHA DE FINALIZACION DE LA FORMACION,NUMERO DE FICHA,Fecha de  cierre inscripción,"
    "Tipo de Oferta,Horario de inicio,Hora final,Ambiente de formación,\"Lunes, Miercoles, Viernes\"\n"
    "TECNICO EN SISTEMAS -- 228106,2099-02-01,2099-12-15T00:00:00,2900001,15/01/2099,Abierta,6:00 pm,10:00 pm,AULA 301 BLOQUE B,lunes miercoles viernes\n"
    "Programación de software,2099-02-01,2099-11-30,2900002,10/01/2099 23:59,ABIERTA ,7:00 am,12:00 pm,sala de sistemas,martes y jueves\n"
    "\n"
    "Cocina básica,2099-01-10,2099-06-30,2900003,05/01/2099,Cerrada,8:00 am,11:00 am,cocina,sabados\n"
    "Inglés A1,2020-02-01,2020-06-30,2900004,01/01/2020,Abierta,8:00 am,11:00 am,aula 2,lunes\n"
    "Contabilidad,2099-02-01,2099-06-30,2900005,pendiente,Abierta,8:00 am,11:00 am,aula 3,martes\n"
)


def _make_row(closing, offer_type, **extra):
    row = {FIELD_KEYS.closing: closing, FIELD_KEYS.offer_type: offer_type}
    row.update(extra)
    return row


@pytest.fixture
def make_row():
    return _make_row


@pytest.fixture
def feed_csv() -> str:
    return FEED_CSV


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, sheet_csv_url="https://example.test/feed.csv")
