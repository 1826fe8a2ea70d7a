# External medical databases
from .medlineplus_connector import MedlinePlusConnector
from .pubmed_connector import PubMedConnector

__all__ = [
    "MedlinePlusConnector",
    "PubMedConnector",
]
