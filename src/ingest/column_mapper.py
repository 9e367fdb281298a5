"""Canonical column keys for the request sheet."""

from dataclasses import dataclass

from src.ingest.normalizer import normalize_header


@dataclass(frozen=True)
class ColumnMapping:
    """Literal sheet headers for the fields the tracker reads.

    Lookups go through the normalized form of each header, so a sheet using
    "PETICION" or " Petición " resolves to the same field.
    """
    peticion: str = "Petición"
    asignado: str = "Asignado"
    fecha: str = "Fecha"
    respondida: str = "Respondida"
    fecha_respuesta: str = "FechaRespuesta"

    @property
    def keys(self) -> dict[str, str]:
        """Map field name -> normalized lookup key."""
        return {
            "peticion": normalize_header(self.peticion),
            "asignado": normalize_header(self.asignado),
            "fecha": normalize_header(self.fecha),
            "respondida": normalize_header(self.respondida),
            "fecha_respuesta": normalize_header(self.fecha_respuesta),
        }

    def get(self, row: dict, name: str) -> str:
        """Return a field of a normalized row, or "" when the sheet lacks it."""
        value = row.get(self.keys[name], "")
        return "" if value is None else str(value)

    def map_row(self, row: dict) -> dict:
        """Map a normalized row dict to internal field names."""
        return {name: self.get(row, name) for name in self.keys}
