from enum import Enum


class Speaker(Enum):
    DOCTOR = "doctor"
    PATIENT = "patient"
