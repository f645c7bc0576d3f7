from enum import Enum


class BookType(str, Enum):
    COMPUTER = "COMPUTER"
    ECONOMY = "ECONOMY"
    SOCIETY = "SOCIETY"
    LANGUAGE = "LANGUAGE"
    SCIENCE = "SCIENCE"
