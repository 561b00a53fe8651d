"""
User-facing text bundles.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Messages:
    heading: str
    upload_label: str
    analyze_label: str
    reset_label: str
    loading_text: str
    no_image_selected: str
    analysis_failed: str
    scientific_name_label: str
    origin_label: str
    description_label: str
    health_label: str
    healthy_badge: str
    unhealthy_badge: str
    care_label: str
    no_care_recommendations: str


SPANISH = Messages(
    heading="Descubre el mundo de tus plantas",
    upload_label="Sube una foto de tu planta",
    analyze_label="Analizar Planta",
    reset_label="Analizar otra planta",
    loading_text="Analizando tu planta...",
    no_image_selected="Por favor, selecciona una imagen primero.",
    analysis_failed="No se pudo analizar la imagen. Por favor, inténtalo de nuevo.",
    scientific_name_label="Nombre científico",
    origin_label="Origen",
    description_label="Descripción",
    health_label="Estado de salud",
    healthy_badge="Saludable",
    unhealthy_badge="Necesita atención",
    care_label="Recomendaciones de cuidado",
    no_care_recommendations="Sin recomendaciones adicionales.",
)

ENGLISH = Messages(
    heading="Discover the world of your plants",
    upload_label="Upload a photo of your plant",
    analyze_label="Analyze Plant",
    reset_label="Analyze another plant",
    loading_text="Analyzing your plant...",
    no_image_selected="Please select an image first.",
    analysis_failed="Could not analyze the image. Please try again.",
    scientific_name_label="Scientific name",
    origin_label="Origin",
    description_label="Description",
    health_label="Health",
    healthy_badge="Healthy",
    unhealthy_badge="Needs attention",
    care_label="Care recommendations",
    no_care_recommendations="No additional recommendations.",
)

_BUNDLES = {
    "es": SPANISH,
    "en": ENGLISH,
}

SUPPORTED_LOCALES = tuple(_BUNDLES)


def get_messages(locale: str = "es") -> Messages:
    """Return the bundle for a locale, falling back to Spanish."""
    return _BUNDLES.get((locale or "").lower(), SPANISH)
