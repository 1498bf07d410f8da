"""
响应数据模型

Game Character Generator API 返回的数据结构，只承载数据，不包含业务逻辑
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AbilityScore:
    value: int = 0
    modifier: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> AbilityScore:
        data = data or {}
        return cls(value=data.get("value", 0), modifier=data.get("modifier", 0))


@dataclass(frozen=True)
class RaceData:
    name: str = ""
    traits: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> RaceData:
        data = data or {}
        return cls(name=data.get("name", ""), traits=tuple(data.get("traits") or ()))


@dataclass(frozen=True)
class ClassData:
    name: str = ""
    description: str = ""
    primary_stat: str = ""
    hit_die: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> ClassData:
        data = data or {}
        return cls(
            name=data.get("name", ""),
            description=data.get("description", ""),
            primary_stat=data.get("primaryStat", ""),
            hit_die=data.get("hitDie", ""),
        )


@dataclass(frozen=True)
class StatsData:
    """六项属性值"""

    strength: AbilityScore = field(default_factory=AbilityScore)
    dexterity: AbilityScore = field(default_factory=AbilityScore)
    constitution: AbilityScore = field(default_factory=AbilityScore)
    intelligence: AbilityScore = field(default_factory=AbilityScore)
    wisdom: AbilityScore = field(default_factory=AbilityScore)
    charisma: AbilityScore = field(default_factory=AbilityScore)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> StatsData:
        data = data or {}
        return cls(
            strength=AbilityScore.from_dict(data.get("strength")),
            dexterity=AbilityScore.from_dict(data.get("dexterity")),
            constitution=AbilityScore.from_dict(data.get("constitution")),
            intelligence=AbilityScore.from_dict(data.get("intelligence")),
            wisdom=AbilityScore.from_dict(data.get("wisdom")),
            charisma=AbilityScore.from_dict(data.get("charisma")),
        )


@dataclass(frozen=True)
class GameCharacterData:
    """生成的角色"""

    name: str = ""
    race: RaceData = field(default_factory=RaceData)
    character_class: ClassData = field(default_factory=ClassData)
    background: str = ""
    personality: str = ""
    motivation: str = ""
    stats: StatsData = field(default_factory=StatsData)
    hp: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> GameCharacterData:
        data = data or {}
        return cls(
            name=data.get("name", ""),
            race=RaceData.from_dict(data.get("race")),
            character_class=ClassData.from_dict(data.get("class")),
            background=data.get("background", ""),
            personality=data.get("personality", ""),
            motivation=data.get("motivation", ""),
            stats=StatsData.from_dict(data.get("stats")),
            hp=data.get("hp", 0),
        )


@dataclass(frozen=True)
class GameCharacterResponse:
    """
    API 响应信封

    属性:
        status: "ok" 或 "error"
        error: 错误描述，成功时为 None
        data: 角色数据，失败时为 None
        code: 业务状态码（可选）
    """

    status: str = ""
    error: str | None = None
    data: GameCharacterData | None = None
    code: int | None = None

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> GameCharacterResponse:
        data = payload.get("data")
        return cls(
            status=payload.get("status", ""),
            error=payload.get("error"),
            data=GameCharacterData.from_dict(data) if data is not None else None,
            code=payload.get("code"),
        )
