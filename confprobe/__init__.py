"""confprobe: lit un fichier de config JSON, l'analyse et affiche le résultat."""

__version__ = "0.1.0"
