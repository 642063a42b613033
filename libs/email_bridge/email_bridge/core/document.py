"""
Document — mapping id → bloc, enraciné sur un bloc EmailLayout d'id "root".

Invariants vérifiés à la validation :
  - la clé "root" existe et porte un EmailLayout
  - tout id référencé dans childrenIds existe dans le mapping
  - aucun cycle (y compris un enfant nommant "root")
"""
from typing import Any, Dict, List, Optional

from pydantic import RootModel, model_validator

from ..blocks import BlockUnion, BaseBlock, EmailLayoutBlock, EmailLayoutData, children_of

ROOT_ID = "root"


class Document(RootModel[Dict[str, BlockUnion]]):
    """Arbre de blocs de l'éditeur. Égalité structurelle (ordre des clés ignoré)."""

    @model_validator(mode="after")
    def _check_tree(self) -> "Document":
        blocks = self.root
        if ROOT_ID not in blocks:
            raise ValueError(f"bloc {ROOT_ID!r} manquant")
        if not isinstance(blocks[ROOT_ID], EmailLayoutBlock):
            raise ValueError(f"le bloc {ROOT_ID!r} doit être un EmailLayout, reçu {blocks[ROOT_ID].type!r}")
        for block_id, block in blocks.items():
            for child_id in children_of(block):
                if child_id not in blocks:
                    raise ValueError(f"enfant {child_id!r} de {block_id!r} introuvable")
                if child_id == ROOT_ID:
                    raise ValueError(f"{ROOT_ID!r} ne peut pas être l'enfant de {block_id!r}")
        _check_acyclic(blocks)
        return self

    @property
    def blocks(self) -> Dict[str, BaseBlock]:
        return dict(self.root)

    @property
    def layout(self) -> EmailLayoutBlock:
        return self.root[ROOT_ID]

    def get(self, block_id: str) -> Optional[BaseBlock]:
        return self.root.get(block_id)

    def to_wire(self, compact: bool = True) -> Dict[str, Any]:
        """
        Forme JSON de l'éditeur (camelCase).

        compact=True omet les valeurs None (affichage, API). Le codec utilise compact=False :
        une clé libre valant null (style/props ouverts) doit survivre à l'aller-retour.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=compact)

    @classmethod
    def from_wire(cls, data: Any) -> "Document":
        return cls.model_validate(data)


def new_document(children_ids: List[str], blocks: Dict[str, BaseBlock], **layout: Any) -> Document:
    """Assemble un Document : racine EmailLayout (valeurs par défaut) + blocs fournis."""
    root = EmailLayoutBlock(data=EmailLayoutData(children_ids=list(children_ids), **layout))
    return Document({ROOT_ID: root, **blocks})


def _check_acyclic(blocks: Dict[str, BaseBlock]) -> None:
    """Parcours en profondeur itératif : un bloc ne peut pas être son propre ancêtre."""
    state: Dict[str, int] = {}  # 1 = en cours, 2 = terminé
    for start in blocks:
        if start in state:
            continue
        state[start] = 1
        stack = [(start, iter(children_of(blocks[start])))]
        while stack:
            block_id, children = stack[-1]
            child_id = next(children, None)
            if child_id is None:
                state[block_id] = 2
                stack.pop()
            elif state.get(child_id) == 1:
                raise ValueError(f"cycle : {child_id!r} est un ancêtre de {block_id!r}")
            elif child_id not in state:
                state[child_id] = 1
                stack.append((child_id, iter(children_of(blocks[child_id]))))
