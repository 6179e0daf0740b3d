"""Render policy controlling where reduced pieces land."""
from typing import Callable, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

HeadSection = Literal["stylesheets", "scripts", "styles", "head"]

DEFAULT_HEAD_ORDER: Tuple[HeadSection, ...] = ("stylesheets", "scripts", "styles", "head")


class RenderPolicy(BaseModel):
    """
    Ordering and placement knobs for reduction.

    Attributes:
        head_order: Order of the four head sections. Must name each exactly once.
        script_placement: "head" renders external scripts in the head,
            "body" moves them to the end of the body.
        default_media: Media key given to inline styles that carry none.
            "all" renders them in a plain <style> block; any other value
            wraps them in that @media rule alongside explicitly scoped styles.
        static_content: Optional hook ``css -> url``. When it returns a url for
            a style block, a stylesheet link replaces the inline block.
    """

    model_config = ConfigDict(frozen=True)

    head_order: Tuple[HeadSection, ...] = DEFAULT_HEAD_ORDER
    script_placement: Literal["head", "body"] = "head"
    default_media: str = "all"
    static_content: Optional[Callable[[str], Optional[str]]] = None

    @field_validator("head_order")
    @classmethod
    def _check_head_order(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if sorted(value) != sorted(DEFAULT_HEAD_ORDER):
            raise ValueError(
                f"head_order must name each of {', '.join(DEFAULT_HEAD_ORDER)} exactly once"
            )
        return value

    @field_validator("default_media")
    @classmethod
    def _check_default_media(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("default_media must not be empty")
        return value
