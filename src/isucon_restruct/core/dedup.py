import logging
from collections.abc import Iterable

from isucon_restruct.models import Fragment, Model

logger = logging.getLogger(__name__)


def dedup_fragments(fragments: Iterable[Fragment]) -> list[Fragment]:
    """Merge same-named ``Model`` fragments of one namespace level.

    Non-model fragments keep their order. Merged models follow them, ordered by
    the first appearance of each name; contributing contents are joined with a
    line break in source order.
    """
    others: list[Fragment] = []
    models_by_name: dict[str, list[Model]] = {}

    for fragment in fragments:
        if isinstance(fragment, Model):
            models_by_name.setdefault(fragment.name, []).append(fragment)
        else:
            others.append(fragment)

    merged: list[Fragment] = []
    for name, models in models_by_name.items():
        if len(models) > 1:
            logger.debug("Merging %d declarations into model %s", len(models), name)
        merged.append(Model(name=name, content="\n".join(model.content for model in models)))

    return others + merged
