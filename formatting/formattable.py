# formatting/formattable.py
from abc import ABC, abstractmethod

from formatting.parameters.collection import ReadOnlyFormattingParameters


class Formattable(ABC):
    """
    An object whose related code can be formatted according to a set of parameters.

    Implementations decide which keys they read and what formatting produces.
    """

    @abstractmethod
    def format(self, parameters: ReadOnlyFormattingParameters) -> None:
        """
        Format the object's code according to ``parameters``.

        Args:
            parameters: A read-only or mutable parameter bag. Implementations
                must only read from it.
        """
        pass
