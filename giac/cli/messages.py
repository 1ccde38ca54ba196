"""Bilingual (French/English) catalog of user-facing CLI strings."""

from dataclasses import dataclass

from ..core.models.spec import Language


@dataclass(frozen=True)
class Messages:
    """All UI strings for one language."""

    # Errors
    error_invalid_level_input: str
    error_axis_not_found: str
    error_retrieving_spec: str

    # Help
    help_axis_identifier: str

    # Interactive prompts
    prompt_available_levels: str
    prompt_choose_level: str
    info_interactive_mode_activated: str
    info_cancelled: str

    # Labels
    label_initials: str
    label_description: str
    label_levels: str
    label_level: str
    label_name: str
    label_priority: str
    label_axis: str

    # Titles
    title_specification: str
    title_selected_profile: str
    title_generated_prompt: str


_FR = Messages(
    error_invalid_level_input="Valeur invalide. Entrez un niveau ou un nom de niveau",
    error_axis_not_found="Axe introuvable",
    error_retrieving_spec="Erreur lors de la récupération de la spec",
    help_axis_identifier="Utilisez un ID, une initiale, ou un nom d'axe (FR ou EN)",
    prompt_available_levels="Niveaux disponibles:",
    prompt_choose_level="Choisissez un niveau pour",
    info_interactive_mode_activated=(
        "Certains axes ne sont pas spécifiés. Mode interactif activé."
    ),
    info_cancelled="Saisie annulée",
    label_initials="Initiales",
    label_description="Description",
    label_levels="Niveaux",
    label_level="Niveau",
    label_name="Nom",
    label_priority="Priorité",
    label_axis="Axe",
    title_specification="Spécification GIAC",
    title_selected_profile="Profil sélectionné",
    title_generated_prompt="Prompt généré",
)

_EN = Messages(
    error_invalid_level_input="Invalid value. Enter a level or a level name",
    error_axis_not_found="Axis not found",
    error_retrieving_spec="Error retrieving spec",
    help_axis_identifier="Use an ID, an initial, or an axis name (FR or EN)",
    prompt_available_levels="Available levels:",
    prompt_choose_level="Choose a level for",
    info_interactive_mode_activated=(
        "Some axes are not specified. Interactive mode activated."
    ),
    info_cancelled="Input cancelled",
    label_initials="Initials",
    label_description="Description",
    label_levels="Levels",
    label_level="Level",
    label_name="Name",
    label_priority="Priority",
    label_axis="Axis",
    title_specification="GIAC Specification",
    title_selected_profile="Selected Profile",
    title_generated_prompt="Generated Prompt",
)


def get_messages(lang: Language) -> Messages:
    """Message catalog for ``lang`` (English for anything but "fr")."""
    return _FR if lang == "fr" else _EN
