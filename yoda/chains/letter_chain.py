import random
from typing import Iterable, List, Optional

from yoda.models import EmotionTag, PersonaKind
from yoda.prompts.letter_prompt import LetterPrompts


class LetterChain:
    """Assemble supportive letters from persona fragments.

    salutation -> acknowledgment (+ one clause per recognised emotion)
    -> persona body -> closing signature.

    With ``randomize=True`` the body is one paragraph drawn from the persona's
    pool with ``self.rng``; otherwise the persona's fixed body is used.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def render(
        self,
        user_name: str,
        content: str,
        emotions: Iterable[str],
        sender_type: str,
        sender_name: Optional[str] = None,
        randomize: bool = True,
    ) -> str:
        emotions = list(emotions)
        key = self._fragment_key(sender_type, sender_name)

        if randomize:
            body = self._format_body(self.rng.choice(LetterPrompts.POOLS[key]), user_name, content, emotions)
        else:
            body = self._fixed_body(key)

        return self._assemble(user_name, content, emotions, sender_type, sender_name, body)

    def variants(
        self,
        user_name: str,
        content: str,
        emotions: Iterable[str],
        sender_type: str,
        sender_name: Optional[str] = None,
        randomize: bool = True,
    ) -> List[str]:
        """Every letter ``render`` can return for these inputs."""
        emotions = list(emotions)
        key = self._fragment_key(sender_type, sender_name)

        if randomize:
            bodies = [self._format_body(t, user_name, content, emotions) for t in LetterPrompts.POOLS[key]]
        else:
            bodies = [self._fixed_body(key)]

        return [
            self._assemble(user_name, content, emotions, sender_type, sender_name, body)
            for body in bodies
        ]

    # ---- fragments ----

    def _fragment_key(self, sender_type: str, sender_name: Optional[str]) -> str:
        kind = PersonaKind.parse(sender_type)
        if kind is PersonaKind.CELEBRITY and sender_name and "trump" in sender_name.lower():
            return LetterPrompts.TRUMP_KEY
        return kind.value

    def _assemble(self, user_name, content, emotions, sender_type, sender_name, body) -> str:
        parts = [
            LetterPrompts.SALUTATION.format(name=user_name),
            self._acknowledgment(user_name, content, emotions).rstrip(),
            body,
            self._closing(sender_type, sender_name),
        ]
        return "\n\n".join(parts)

    def _acknowledgment(self, user_name: str, content: str, emotions: List[str]) -> str:
        text = LetterPrompts.ACKNOWLEDGMENT.format(name=user_name, content=content)
        tags = {EmotionTag.parse(e).value for e in emotions}
        # clause order is fixed, independent of submission order
        for tag, clause in LetterPrompts.EMOTION_CLAUSES.items():
            if tag in tags:
                text += clause
        return text

    def _format_body(self, template: str, user_name: str, content: str, emotions: List[str]) -> str:
        return template.format(
            name=user_name,
            content=content,
            emotions=" and ".join(emotions) if emotions else "mixed feelings",
        )

    def _fixed_body(self, key: str) -> str:
        return "\n\n".join(LetterPrompts.BODIES[key])

    def _closing(self, sender_type: str, sender_name: Optional[str]) -> str:
        kind = PersonaKind.parse(sender_type)
        if kind is PersonaKind.FUTURE_SELF:
            return LetterPrompts.CLOSING_FUTURE_SELF
        if kind is PersonaKind.LOVED_ONE:
            return LetterPrompts.CLOSING_LOVED_ONE.format(sender=sender_name or LetterPrompts.FALLBACK_LOVED_ONE)
        return LetterPrompts.CLOSING_DEFAULT.format(sender=sender_name or LetterPrompts.FALLBACK_SENDER)
