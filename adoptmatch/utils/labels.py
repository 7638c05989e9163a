"""
Display labels for profile codes, used to build match messages.
"""

from typing import Any, Dict

LABELS: Dict[str, Dict[str, str]] = {
    "housing": {"CASA": "Casa", "APARTAMENTO": "Apartamento", "INDIFERENTE": "Indiferente"},
    "time_at_home": {"MOST_DAY": "Maior parte do dia", "HALF_DAY": "Metade do dia", "LITTLE": "Pouco tempo"},
    "pets_allowed": {"YES": "Sim", "NO": "Não", "UNSURE": "Não sei"},
    "experience": {"NEVER": "Nunca tive", "HAD_BEFORE": "Já tive", "HAVE_NOW": "Tenho atualmente"},
    "household_agrees": {"YES": "Todos concordam", "DISCUSSING": "Ainda conversando"},
    "activity": {"LOW": "Sedentário", "MEDIUM": "Moderado", "HIGH": "Ativo"},
    "preferred_age": {"PUPPY": "Filhote", "ADULT": "Adulto", "SENIOR": "Idoso", "ANY": "Qualquer"},
    "walk_frequency": {
        "DAILY": "Diariamente",
        "FEW_TIMES_WEEK": "Algumas vezes por semana",
        "RARELY": "Raramente",
        "NOT_APPLICABLE": "Não se aplica",
        "INDIFERENTE": "Indiferente",
    },
    "budget": {"LOW": "Até ~R$ 100/mês", "MEDIUM": "~R$ 100–300/mês", "HIGH": "Acima de ~R$ 300/mês"},
    "species": {"DOG": "Cachorro", "CAT": "Gato"},
    "sex": {"male": "Macho", "female": "Fêmea"},
    "size": {"small": "Pequeno", "medium": "Médio", "large": "Grande", "xlarge": "Muito grande"},
}


def label_for(table: str, code: Any) -> str:
    """
    Look up the display label of a code.

    Args:
        table: Label table name (e.g. "housing")
        code: Code to translate

    Returns:
        The label, or the raw code when the table or code is unknown
    """
    return LABELS.get(table, {}).get(code, str(code))
