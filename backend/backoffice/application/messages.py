"""User-facing notification texts (French, the back-office's only locale)."""

NOT_LOGGED_IN = "Vous devez être connecté pour effectuer cette action"
UNRECOGNIZED_ACTION = "Action non reconnue"
FORBIDDEN = "Vous n'avez pas les droits nécessaires pour effectuer cette action"
INVALID_INPUT = "Le formulaire contient des erreurs"
STORAGE_FAILURE = "une erreur s'est produite : contactez l'administrateur"
ARTICLE_NOT_FOUND = "Pas d'article correspondant à cet ID"
USER_NOT_FOUND = "Aucun utilisateur ne correspond"

ARTICLE_CREATED = "L'article a été créé avec succès"
ARTICLE_CREATE_FAILED = "Une erreur est survenue lors de la création de l'article"
ARTICLE_SLUG_NOT_CREATED = (
    "L'article a été créé mais son index n'a pas pu être enregistré : contactez l'administrateur"
)
ARTICLE_DUPLICATE_SLUG = "Un article portant ce titre existe déjà"
ARTICLE_TITLE_WITHOUT_SLUG = "Le titre doit contenir au moins une lettre ou un chiffre"
ARTICLE_UPDATED = "L'article a été mis à jour avec succès"
ARTICLE_UPDATE_FAILED = "Une erreur est survenue lors de la mise à jour de l'article"
ARTICLE_DELETED = "L'article a été supprimé avec succès"
ARTICLE_DELETE_FAILED = "une erreur s'est produite lors de la suppression de l'article"
ARTICLE_VALIDATED = "L'article a été validé avec succès"
ARTICLE_INVALIDATED = "L'article a été invalidé avec succès"
ARTICLE_VALIDATE_FAILED = "Une erreur est survenue lors de la validation de l'article"
ARTICLE_SLUG_NOT_SYNCED = "l'index de l'article n'a pas été mis à jour"
ARTICLE_SHIPPED = "L'article est en ligne"
ARTICLE_UNSHIPPED = "L'article est hors ligne"
ARTICLE_SHIP_FAILED = "Une erreur est survenue lors de la mise en ligne de l'article"
ARTICLE_MUST_BE_VALIDATED = "L'article doit être validé avant d'être mis en ligne"

USER_CREATED = "L'utilisateur a été créé avec succès"
USER_CREATE_FAILED = "Une erreur est survenue lors de la création de l'utilisateur"
USER_DUPLICATE = "Un utilisateur avec cet email existe déjà"
USER_UPDATED = "L'utilisateur a été mis à jour avec succès"
USER_UPDATE_FAILED = "Une erreur est survenue lors de la mise à jour de l'utilisateur"
USER_DELETED = "L'utilisateur a été supprimé avec succès"
USER_DELETE_FAILED = "Une erreur est survenue lors de la suppression de l'utilisateur"

FIELD_ERRORS = {
    "title": "Le titre doit avoir entre 2 et 50 caractères",
    "slug": "Le slug ne peut pas être modifié",
    "introduction": "L'introduction doit avoir au moins 20 caractères",
    "main": "Le texte principal doit avoir au moins 50 caractères",
    "main_audio_url": "Le lien audio est requis",
    "url_to_main_illustration": "Au moins un lien est requis",
    "urls": "Liens multimédias mal formés",
    "email": "Mauvais format d'email",
    "tiers_service_ident": "Champ requis",
    "role": "Rôle inconnu",
    "permissions": "Permissions inconnues",
    "id": "Identifiant invalide",
}
