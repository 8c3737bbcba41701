from mindmanaged.domains.medications.services.medication_service import (
    MedicationApiSettings,
    MedicationSearchError,
    check_connection,
    search_medications,
)

__all__ = [
    "MedicationApiSettings",
    "MedicationSearchError",
    "check_connection",
    "search_medications",
]
