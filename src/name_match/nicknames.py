"""Bundled formal name to nickname table."""

from __future__ import annotations

from typing import Dict, Tuple


NICKNAME_MAP: Dict[str, Tuple[str, ...]] = {
    "william": ("will", "bill", "billy", "willy"),
    "robert": ("rob", "bob", "bobby"),
    "richard": ("rick", "dick", "richie", "ricky"),
    "michael": ("mike", "mikey", "mick"),
    "james": ("jim", "jimmy", "jamie"),
    "joseph": ("joe", "joey", "jo"),
    "thomas": ("tom", "tommy"),
    "christopher": ("chris", "topher"),
    "charles": ("chuck", "charlie", "chas"),
    "daniel": ("dan", "danny"),
    "matthew": ("matt", "matty"),
    "anthony": ("tony", "ant"),
    "steven": ("steve", "stevie"),
    "kenneth": ("ken", "kenny"),
    "edward": ("ed", "eddie", "ted", "teddy"),
    "donald": ("don", "donny"),
    "elizabeth": ("liz", "lizzy", "beth", "betty", "eli"),
    "jennifer": ("jen", "jenny"),
    "katherine": ("kathy", "kate", "katie", "katy"),
    "margaret": ("maggie", "meg", "megan", "peggy"),
    "patricia": ("pat", "patty", "trish"),
    "deborah": ("deb", "debbie"),
    "jessica": ("jess", "jessie"),
    "sandra": ("sandy",),
    "barbara": ("barb", "barbie"),
    "stephanie": ("steph", "stephy"),
    "victoria": ("vicky", "tori"),
    "jonathan": ("jon", "jonny"),
    "nicholas": ("nick", "nicky"),
    "jeffrey": ("jeff",),
    "benjamin": ("ben", "benny"),
    "timothy": ("tim", "timmy"),
    "gregory": ("greg", "gregg"),
    "raymond": ("ray",),
    "samuel": ("sam", "sammy"),
    "andrew": ("andy", "drew"),
    "alexander": ("alex", "al"),
    "david": ("dave", "davey"),
    "joshua": ("josh",),
}


def nickname_variants(first_name: str) -> list[str]:
    """Return `first_name` followed by its nicknames and formal forms."""

    variants = [first_name]
    variants.extend(NICKNAME_MAP.get(first_name, ()))
    for formal, nicknames in NICKNAME_MAP.items():
        if first_name in nicknames:
            variants.append(formal)
    return variants
