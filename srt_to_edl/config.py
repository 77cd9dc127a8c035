"""
Modulo per la gestione della configurazione del convertitore SRT -> EDL
"""
import copy
import os
import re
import yaml
from typing import Dict, Any, Optional

from .core.models import (
    DEFAULT_FRAME_RATE,
    DEFAULT_MARKER_COLOR,
    DEFAULT_START_TIMECODE,
    MarkerSettings,
)
from .core.selections import parse_frame_rate, parse_marker_color


_INT_TAG = 'tag:yaml.org,2002:int'
_FLOAT_TAG = 'tag:yaml.org,2002:float'


class ConfigLoader(yaml.SafeLoader):
    """SafeLoader senza numeri sessagesimali: `1:00:00` resta una stringa (timecode)"""


ConfigLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in (_INT_TAG, _FLOAT_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
ConfigLoader.add_implicit_resolver(
    _INT_TAG,
    re.compile(r'''^(?:[-+]?0b[0-1_]+
    |[-+]?0[0-7_]+
    |[-+]?(?:0|[1-9][0-9_]*)
    |[-+]?0x[0-9a-fA-F_]+)$''', re.X),
    list('-+0123456789'))
ConfigLoader.add_implicit_resolver(
    _FLOAT_TAG,
    re.compile(r'''^(?:[-+]?(?:[0-9][0-9_]*)\.[0-9_]*(?:[eE][-+][0-9]+)?
    |\.[0-9_]+(?:[eE][-+][0-9]+)?
    |[-+]?\.(?:inf|Inf|INF)
    |\.(?:nan|NaN|NAN))$''', re.X),
    list('-+0123456789.'))


class Config:
    """Classe per gestire la configurazione dell'applicazione"""

    DEFAULT_CONFIG = {
        'fps': DEFAULT_FRAME_RATE,
        'marker_color': DEFAULT_MARKER_COLOR,
        'start_timecode': DEFAULT_START_TIMECODE,
        'output_dir': None,
        'overrides': {},
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Inizializza la configurazione

        Args:
            config_file: Path al file di configurazione YAML (opzionale)
        """
        # Deep copy per evitare modifiche ai default
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file and os.path.exists(config_file):
            self.load_from_file(config_file)

    def load_from_file(self, config_file: str) -> None:
        """
        Carica la configurazione da file YAML

        Args:
            config_file: Path al file di configurazione
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = yaml.load(f, Loader=ConfigLoader)
        except Exception as e:
            raise Exception(f"Errore nel caricamento del file di configurazione: {e}")

        if not file_config:
            return
        if not isinstance(file_config, dict):
            raise Exception("Errore nel caricamento del file di configurazione: "
                            "il contenuto deve essere una mappa chiave/valore")
        for key, value in file_config.items():
            # Merge profondo per overrides (impostazioni per singolo file)
            if key == 'overrides' and isinstance(value, dict):
                self._deep_merge(self.config['overrides'], value)
            else:
                self.config[key] = value

    def _deep_merge(self, base: dict, update: dict) -> None:
        """
        Merge profondo di dizionari nested

        Args:
            base: Dizionario base da aggiornare
            update: Dizionario con gli aggiornamenti
        """
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Aggiorna la configurazione con argomenti da CLI
        Gli argomenti CLI hanno precedenza sul file di configurazione

        Args:
            args: Dizionario con gli argomenti da CLI
        """
        for key, value in args.items():
            if value is not None:
                self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Ottiene un valore di configurazione

        Args:
            key: Chiave della configurazione
            default: Valore di default se la chiave non esiste

        Returns:
            Il valore della configurazione
        """
        return self.config.get(key, default)

    def get_all(self) -> Dict[str, Any]:
        """
        Ottiene tutta la configurazione

        Returns:
            Dizionario con tutta la configurazione
        """
        return self.config.copy()

    def to_settings(self, filename: Optional[str] = None) -> MarkerSettings:
        """
        Costruisce le impostazioni di conversione validate

        Le chiavi in ``overrides[<nome file>]`` prevalgono su quelle globali
        per quel solo file sorgente.

        Args:
            filename: Nome del file sorgente (opzionale)

        Returns:
            MarkerSettings con fps e colore validati

        Raises:
            ValueError: se fps o colore non sono tra i valori ammessi
        """
        values = {
            'fps': self.get('fps'),
            'marker_color': self.get('marker_color'),
            'start_timecode': self.get('start_timecode'),
        }
        if filename:
            overrides = (self.get('overrides') or {}).get(os.path.basename(filename))
            if isinstance(overrides, dict):
                values.update({k: v for k, v in overrides.items() if k in values and v is not None})

        start_timecode = values['start_timecode']
        if start_timecode is None:
            start_timecode = DEFAULT_START_TIMECODE

        return MarkerSettings(
            frames_per_second=parse_frame_rate(values['fps']),
            marker_color=parse_marker_color(values['marker_color']),
            start_timecode=str(start_timecode),
        )
