from collections.abc import Iterable
from typing import ClassVar, Type

from passpal.core.exceptions import AgentIndexError, SelectionError
from passpal.models.schemas import AgentInfo
from passpal.services.agents.base import Agent
from passpal.services.agents.character_frequency import CharacterFrequencyAgent
from passpal.services.agents.charset_frequency import CharsetFrequencyAgent
from passpal.services.agents.charset_position import CharsetPositionAgent
from passpal.services.agents.hashcat_mask import HashcatMaskFrequencyAgent
from passpal.services.agents.length_frequency import LengthFrequencyAgent
from passpal.services.agents.symbol_frequency import SymbolFrequencyAgent
from passpal.services.agents.word_frequency import BaseWordFrequencyAgent, WordFrequencyAgent


class AgentRegistry:
    """
    The fixed, ordered catalog of analysis agents.

    Agents are addressed by 1-based index at the boundary (command line,
    API). The order here is the order agents see each line and the order
    their reports are emitted in.
    """

    _catalog: ClassVar[tuple[Type[Agent], ...]] = (
        WordFrequencyAgent,
        BaseWordFrequencyAgent,
        LengthFrequencyAgent,
        CharsetFrequencyAgent,
        HashcatMaskFrequencyAgent,
        CharsetPositionAgent,
        CharacterFrequencyAgent,
        SymbolFrequencyAgent,
    )

    @classmethod
    def catalog(cls) -> tuple[Type[Agent], ...]:
        return cls._catalog

    @classmethod
    def size(cls) -> int:
        return len(cls._catalog)

    @classmethod
    def describe(cls) -> list[AgentInfo]:
        """
        List the catalog as exposed for selection.

        Returns:
            One AgentInfo per agent, in catalog order
        """
        return [
            AgentInfo(
                index=index,
                agent_type=agent_class.agent_type,
                name=agent_class.name,
                description=agent_class.description,
            )
            for index, agent_class in enumerate(cls._catalog, start=1)
        ]

    @classmethod
    def get(cls, index: int) -> Type[Agent]:
        """
        Look up an agent class by 1-based index.

        Raises:
            AgentIndexError: If the index is outside the catalog
        """
        if not 1 <= index <= len(cls._catalog):
            raise AgentIndexError(index, len(cls._catalog))
        return cls._catalog[index - 1]

    @classmethod
    def select(
        cls,
        include: Iterable[int] | None = None,
        exclude: Iterable[int] | None = None,
    ) -> list[Type[Agent]]:
        """
        Resolve an include or exclude list into agent classes.

        Args:
            include: Run only these 1-based indices
            exclude: Run every agent except these 1-based indices

        Returns:
            Selected agent classes, always in catalog order

        Raises:
            SelectionError: If both lists are given
            AgentIndexError: If any index is outside the catalog
        """
        if include is not None and exclude is not None:
            raise SelectionError(
                "Include and exclude selections are mutually exclusive",
                {"include": list(include), "exclude": list(exclude)},
            )

        if include is not None:
            chosen = cls._validate(include)
            return [
                agent_class
                for index, agent_class in enumerate(cls._catalog, start=1)
                if index in chosen
            ]

        if exclude is not None:
            dropped = cls._validate(exclude)
            return [
                agent_class
                for index, agent_class in enumerate(cls._catalog, start=1)
                if index not in dropped
            ]

        return list(cls._catalog)

    @classmethod
    def _validate(cls, indices: Iterable[int]) -> set[int]:
        validated = set()
        for index in indices:
            if isinstance(index, bool) or not isinstance(index, int):
                raise SelectionError(
                    f"Agent index must be an integer, got {index!r}",
                    {"index": repr(index)},
                )
            cls.get(index)
            validated.add(index)
        return validated

    @classmethod
    def create(
        cls,
        top_k: int = 10,
        include: Iterable[int] | None = None,
        exclude: Iterable[int] | None = None,
    ) -> list[Agent]:
        """Instantiate the selected agents with a shared top-k bound."""
        return [agent_class(top_k=top_k) for agent_class in cls.select(include, exclude)]
