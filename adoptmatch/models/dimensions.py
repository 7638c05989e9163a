"""
Compatibility dimensions evaluated by the scorer.

Each dimension is a small pure function ``(adopter, preferences)`` returning a
``CriterionOutcome``, or ``None`` when the dimension does not apply to this
pair. ``DIMENSIONS`` fixes the evaluation order, which is also the order of
criteria, highlights and concerns in a ``MatchResult``.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from ..schemas.adopter_profile import (
    ActivityLevel,
    AdopterProfile,
    Experience,
    HouseholdAgreement,
    MonthlyBudget,
    PetsAllowed,
    PreferredPetAge,
    SexPreference,
    SizePreference,
    SpeciesPreference,
    VetCareCommitment,
    WalkFrequency,
)
from ..schemas.match_result import CriterionStatus
from ..schemas.pet_preferences import PetTutorPreferences, INDIFERENTE
from ..utils.helpers import age_bracket, format_age, is_filled
from ..utils.labels import label_for
from ..utils.validators import normalize_code, ordinal


NOT_INFORMED = "Não informado no perfil."
INCONCLUSIVE = "Combinação não conclusiva; conta como neutro."

CREDITS: Dict[CriterionStatus, float] = {
    CriterionStatus.MATCH: 1.0,
    CriterionStatus.NEUTRAL: 0.5,
    CriterionStatus.MISMATCH: 0.0,
}

EXPERIENCE_ORDER = {code.value: rank for rank, code in enumerate(Experience)}
ACTIVITY_ORDER = {code.value: rank for rank, code in enumerate(ActivityLevel)}
# NOT_APPLICABLE is an adopter-only answer and has no rank
WALK_ORDER = {
    WalkFrequency.RARELY.value: 0,
    WalkFrequency.FEW_TIMES_WEEK.value: 1,
    WalkFrequency.DAILY.value: 2,
}
TRI_STATE = {"SIM": True, "NAO": False}


@dataclass(frozen=True)
class CriterionOutcome:
    """Result of one dimension before it is folded into the score."""

    status: CriterionStatus
    message: str

    @property
    def credit(self) -> float:
        """Weight earned by this outcome (1.0, 0.5 or 0.0)."""
        return CREDITS[self.status]


Evaluator = Callable[[AdopterProfile, PetTutorPreferences], Optional[CriterionOutcome]]


@dataclass(frozen=True)
class Dimension:
    """A named compatibility dimension."""

    key: str
    label: str
    evaluate: Evaluator


def match(message: str) -> CriterionOutcome:
    return CriterionOutcome(CriterionStatus.MATCH, message)


def mismatch(message: str) -> CriterionOutcome:
    return CriterionOutcome(CriterionStatus.MISMATCH, message)


def neutral(message: str = NOT_INFORMED) -> CriterionOutcome:
    return CriterionOutcome(CriterionStatus.NEUTRAL, message)


# Tutor-side preferences

def evaluate_housing(adopter: AdopterProfile, prefs: PetTutorPreferences) -> Optional[CriterionOutcome]:
    preferred = normalize_code(prefs.preferred_tutor_housing_type)
    if preferred is None:
        return None
    if preferred == INDIFERENTE:
        return match("Moradia: indiferente (compatível com casa ou apartamento)")
    actual = normalize_code(adopter.housing_type)
    if actual is None:
        return neutral()
    if actual == preferred:
        return match(f"Moradia compatível ({label_for('housing', preferred)})")
    return mismatch(
        f"Pet prefere tutor em {label_for('housing', preferred)}; "
        f"você informou {label_for('housing', actual)}."
    )


def _tri_state(
    pref_field: str,
    adopter_field: str,
    indifferent: str,
    matched: Tuple[str, str],
    conflict: Tuple[str, str],
) -> Evaluator:
    """
    Build an evaluator for a SIM/NAO/INDIFERENTE preference against a boolean answer.

    ``matched`` and ``conflict`` hold the (SIM, NAO) messages.
    """

    def evaluate(adopter: AdopterProfile, prefs: PetTutorPreferences) -> Optional[CriterionOutcome]:
        preferred = normalize_code(getattr(prefs, pref_field))
        if preferred is None:
            return None
        if preferred == INDIFERENTE:
            return match(indifferent)
        actual = getattr(adopter, adopter_field)
        if actual is None:
            return neutral()
        wanted = TRI_STATE.get(preferred)
        if wanted is None:
            return mismatch(f"Pet tem uma preferência não reconhecida ({preferred}).")
        if actual == wanted:
            return match(matched[0] if wanted else matched[1])
        return mismatch(conflict[0] if wanted else conflict[1])

    return evaluate


evaluate_yard = _tri_state(
    "preferred_tutor_has_yard",
    "has_yard",
    indifferent="Quintal: indiferente para o pet.",
    matched=("Quintal compatível", "Sem quintal, conforme preferência do pet."),
    conflict=("Pet prefere tutor com quintal.", "Pet prefere tutor sem quintal."),
)

evaluate_other_pets = _tri_state(
    "preferred_tutor_has_other_pets",
    "has_other_pets",
    indifferent="Outros pets: indiferente para o pet.",
    matched=("Outros pets no local, compatível.", "Sem outros pets, compatível."),
    conflict=("Pet se adapta melhor a lares com outros pets.", "Pet prefere ser o único pet."),
)

evaluate_children = _tri_state(
    "preferred_tutor_has_children",
    "has_children",
    indifferent="Crianças: indiferente para o pet.",
    matched=("Crianças em casa, compatível.", "Sem crianças, compatível."),
    conflict=(
        "Pet se dá bem com crianças; seu perfil indica sem crianças.",
        "Pet prefere lar sem crianças.",
    ),
)


def evaluate_time_at_home(adopter: AdopterProfile, prefs: PetTutorPreferences) -> Optional[CriterionOutcome]:
    preferred = normalize_code(prefs.preferred_tutor_time_at_home)
    if preferred is None:
        return None
    if preferred == INDIFERENTE:
        return match("Tempo em casa: indiferente para o pet.")
    actual = normalize_code(adopter.time_at_home)
    if actual is None:
        return neutral()
    if actual == preferred:
        return match(f"Tempo em casa compatível ({label_for('time_at_home', preferred)})")
    return mismatch(f"Pet prefere tutor que fica em casa: {label_for('time_at_home', preferred)}.")


def evaluate_pets_allowed(adopter: AdopterProfile, prefs: PetTutorPreferences) -> Optional[CriterionOutcome]:
    preferred = normalize_code(prefs.preferred_tutor_pets_allowed_at_home)
    if preferred is None:
        return None
    actual = normalize_code(adopter.pets_allowed_at_home)
    if actual is None:
        return neutral()
    if actual == preferred:
        return match(f"Pets permitidos no local: {label_for('pets_allowed', preferred)}")
    if preferred == PetsAllowed.YES and actual in (PetsAllowed.NO, PetsAllowed.UNSURE):
        return mismatch("Pet precisa de local onde pets são permitidos.")
    if preferred == PetsAllowed.NO and actual == PetsAllowed.YES:
        return mismatch(
            "Pet prefere tutor em local onde pets não são permitidos (ex.: restrição do condomínio)."
        )
    return neutral(INCONCLUSIVE)


def _experience(pref_field: str, adopter_field: str, animal: str) -> Evaluator:
    """Build an evaluator for an ordinal NEVER < HAD_BEFORE < HAVE_NOW requirement."""

    def evaluate(adopter: AdopterProfile, prefs: PetTutorPreferences) -> Optional[CriterionOutcome]:
        required = normalize_code(getattr(prefs, pref_field))
        if required is None:
            return None
        actual = normalize_code(getattr(adopter, adopter_field))
        if actual is None:
            return neutral()
        have = ordinal(EXPERIENCE_ORDER, actual)
        need = ordinal(EXPERIENCE_ORDER, required)
        if actual == required or (have >= 0 and need >= 0 and have >= need):
            return match(f"Experiência com {animal}: {label_for('experience', required)}")
        return mismatch(
            f"Pet prefere tutor com experiência com {animal} ({label_for('experience', required)})."
        )

    return evaluate


evaluate_dog_experience = _experience("preferred_tutor_dog_experience", "dog_experience", "cachorro")
evaluate_cat_experience = _experience("preferred_tutor_cat_experience", "cat_experience", "gato")


def evaluate_household(adopter: AdopterProfile, prefs: PetTutorPreferences) -> Optional[CriterionOutcome]:
    preferred = normalize_code(prefs.preferred_tutor_household_agrees)
    if preferred is None:
        return None
    actual = normalize_code(adopter.household_agrees_to_adoption)
    if actual is None:
        return neutral()
    if actual == preferred:
        return match(f"Concordância em casa: {label_for('household_agrees', preferred)}")
    if preferred == HouseholdAgreement.YES and actual == HouseholdAgreement.DISCUSSING:
        return mismatch("Pet prefere que todos em casa já concordem com a adoção.")
    return neutral(INCONCLUSIVE)


# Pet attributes against adopter search preferences

def evaluate_species(adopter: AdopterProfile, prefs: PetTutorPreferences) -> Optional[CriterionOutcome]:
    species = normalize_code(prefs.species)
    wanted = normalize_code(adopter.species_pref)
    if species is None or wanted is None:
        return None
    if wanted == SpeciesPreference.BOTH:
        return match(f"Você aceita qualquer espécie; este pet é {label_for('species', species)}.")
    if species == wanted:
        return match(f"Espécie compatível com sua preferência ({label_for('species', wanted)}).")
    return mismatch(
        f"Você prefere {label_for('species', wanted)}; este pet é {label_for('species', species)}."
    )


def evaluate_sex(adopter: AdopterProfile, prefs: PetTutorPreferences) -> Optional[CriterionOutcome]:
    sex = normalize_code(prefs.sex, upper=False)
    wanted = normalize_code(adopter.sex_pref, upper=False)
    if sex is None or wanted is None:
        return None
    if wanted == SexPreference.BOTH.lower():
        return match(f"Você aceita macho ou fêmea; este pet é {label_for('sex', sex)}.")
    if sex == wanted:
        return match(f"Sexo do pet compatível com sua preferência ({label_for('sex', wanted)}).")
    return mismatch(f"Você prefere pet {label_for('sex', wanted)}; este pet é {label_for('sex', sex)}.")


def evaluate_size(adopter: AdopterProfile, prefs: PetTutorPreferences) -> Optional[CriterionOutcome]:
    size = normalize_code(prefs.size, upper=False)
    wanted = normalize_code(adopter.size_pref, upper=False)
    if size is None or wanted is None or wanted == SizePreference.BOTH.lower():
        return None
    if size == wanted:
        return match(f"Porte compatível com sua preferência ({label_for('size', size)}).")
    return mismatch(f"Você prefere pet {label_for('size', wanted)}; este pet é {label_for('size', size)}.")


def evaluate_activity(adopter: AdopterProfile, prefs: PetTutorPreferences) -> Optional[CriterionOutcome]:
    energy = normalize_code(prefs.energy_level)
    if energy is None:
        return None
    actual = normalize_code(adopter.activity_level)
    if actual is None:
        return neutral()
    have = ordinal(ACTIVITY_ORDER, actual)
    need = ordinal(ACTIVITY_ORDER, energy)
    if have >= 0 and need >= 0 and have >= need:
        return match(f"Seu nível de atividade combina com o pet ({label_for('activity', energy)}).")
    return mismatch(f"Pet é mais ativo ({label_for('activity', energy)}) do que seu perfil indica.")


def evaluate_age(adopter: AdopterProfile, prefs: PetTutorPreferences) -> Optional[CriterionOutcome]:
    wanted = normalize_code(adopter.preferred_pet_age)
    if wanted is None or wanted == PreferredPetAge.ANY or prefs.age is None:
        return None
    if age_bracket(prefs.age) == wanted:
        return match(f"Idade do pet compatível com sua preferência ({label_for('preferred_age', wanted)}).")
    return mismatch(
        f"Você prefere pet {label_for('preferred_age', wanted)}; este tem {format_age(prefs.age)} ano(s)."
    )


def evaluate_vet_care(adopter: AdopterProfile, prefs: PetTutorPreferences) -> Optional[CriterionOutcome]:
    if not (prefs.has_special_needs is True or is_filled(prefs.health_notes)):
        return None
    commits = normalize_code(adopter.commits_to_vet_care)
    if commits == VetCareCommitment.YES:
        return match("Você se compromete com cuidados veterinários; o pet tem necessidades que exigem acompanhamento.")
    if commits == VetCareCommitment.NO:
        return mismatch(
            "Este pet precisa de acompanhamento veterinário; seu perfil indica que não pode se comprometer com isso."
        )
    return neutral()


def evaluate_walks(adopter: AdopterProfile, prefs: PetTutorPreferences) -> Optional[CriterionOutcome]:
    required = normalize_code(prefs.preferred_tutor_walk_frequency)
    if required is None:
        return None
    if required == INDIFERENTE:
        return match("Frequência de passeios: indiferente para o pet.")
    actual = normalize_code(adopter.walk_frequency)
    if actual is None:
        return neutral()
    if required not in WALK_ORDER:
        return mismatch(f"Pet tem uma preferência de passeios não reconhecida ({required}).")
    if actual == WalkFrequency.NOT_APPLICABLE:
        return neutral("Passeios não se aplicam ao seu perfil; critério neutro.")
    have = ordinal(WALK_ORDER, actual)
    if have >= 0 and have >= WALK_ORDER[required]:
        return match(f"Frequência de passeios compatível ({label_for('walk_frequency', required)}).")
    return mismatch(
        f"Pet prefere tutor que passeie com mais frequência ({label_for('walk_frequency', required)})."
    )


def evaluate_budget(adopter: AdopterProfile, prefs: PetTutorPreferences) -> Optional[CriterionOutcome]:
    if prefs.has_ongoing_costs is not True:
        return None
    budget = normalize_code(adopter.monthly_budget_for_pet)
    if budget in (MonthlyBudget.HIGH, MonthlyBudget.MEDIUM):
        return match("Seu orçamento permite arcar com os cuidados contínuos deste pet.")
    if budget == MonthlyBudget.LOW:
        return mismatch(
            "Este pet tem gastos contínuos (ex.: medicação, ração especial); seu orçamento informado é baixo."
        )
    return neutral()


DIMENSIONS: Tuple[Dimension, ...] = (
    Dimension("housing", "Moradia", evaluate_housing),
    Dimension("yard", "Quintal", evaluate_yard),
    Dimension("other_pets", "Outros pets", evaluate_other_pets),
    Dimension("children", "Crianças", evaluate_children),
    Dimension("time_at_home", "Tempo em casa", evaluate_time_at_home),
    Dimension("pets_allowed", "Pets permitidos no local", evaluate_pets_allowed),
    Dimension("dog_experience", "Experiência com cachorro", evaluate_dog_experience),
    Dimension("cat_experience", "Experiência com gato", evaluate_cat_experience),
    Dimension("household", "Concordância em casa", evaluate_household),
    Dimension("species", "Espécie", evaluate_species),
    Dimension("sex", "Sexo", evaluate_sex),
    Dimension("size", "Porte", evaluate_size),
    Dimension("activity", "Nível de atividade", evaluate_activity),
    Dimension("age", "Idade", evaluate_age),
    Dimension("vet_care", "Cuidados veterinários", evaluate_vet_care),
    Dimension("walks", "Passeios", evaluate_walks),
    Dimension("budget", "Orçamento", evaluate_budget),
)
