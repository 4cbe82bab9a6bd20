"""
Text Analysis - Pure tokenization and vocabulary matching.
"""

import re
from typing import Dict, Iterable, List

WORD_PATTERN = re.compile(r'\b[a-z]+\b')


def extract_unique_words(content: str) -> List[str]:
    """Lower-cased [a-z]+ tokens in first-seen order, without repeats."""
    if not content:
        return []
    return list(dict.fromkeys(WORD_PATTERN.findall(content.lower())))


def match_vocabulary(tokens: Iterable[str], vaults: Iterable) -> List[Dict]:
    """
    For each token found in at least one vault (case-insensitive name match),
    the vaults containing it and the matching words.
    """
    index: Dict[str, List] = {}
    for vault in vaults:
        for word in vault.words:
            index.setdefault(word.name.lower(), []).append((vault, word))

    found = []
    for token in tokens:
        hits = index.get(token)
        if not hits:
            continue
        by_vault: Dict[int, Dict] = {}
        for vault, word in hits:
            entry = by_vault.setdefault(vault.vault_id, {'id': vault.vault_id, 'name': vault.name, 'words': []})
            entry['words'].append(word.to_dict())
        found.append({'word': token, 'vaults': list(by_vault.values())})
    return found
