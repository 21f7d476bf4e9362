"""
Erreurs métier du domaine

Toutes dérivent de ValueError : le message est destiné à l'appelant.
"""


class UserServiceError(ValueError):
    """Erreur métier remontée au client avec son message"""


class InvalidInputError(UserServiceError):
    """Champ manquant ou incohérent"""


class RegistrationError(UserServiceError):
    """Échec de l'inscription (ex: hachage impossible)"""


class DuplicateUsernameError(RegistrationError):
    """Nom d'utilisateur déjà pris"""


class InvalidCredentialsError(UserServiceError):
    """Identifiants invalides (utilisateur inconnu ou mauvais mot de passe)"""


class UserNotFoundError(UserServiceError):
    """Identifiant utilisateur inconnu"""


class StorageError(UserServiceError):
    """Erreur du stockage pendant une requête"""
