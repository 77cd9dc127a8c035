"""
Test per il modulo di configurazione
"""
import unittest
import tempfile
import os
import yaml
from srt_to_edl.config import Config


class TestConfig(unittest.TestCase):
    """Test per la classe Config"""

    def _write_yaml(self, content):
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            yaml.dump(content, f)
            return f.name

    def test_default_configuration(self):
        """Test che i valori di default siano correttamente impostati"""
        config = Config()

        self.assertEqual(config.get('fps'), 24.0)
        self.assertEqual(config.get('marker_color'), 'Blue')
        self.assertEqual(config.get('start_timecode'), '01:00:00;00')
        self.assertIsNone(config.get('output_dir'))

    def test_get_with_default_value(self):
        """Test del metodo get con valore di default"""
        config = Config()
        self.assertEqual(config.get('non_existent_key', 'default_value'), 'default_value')
        self.assertIsNone(config.get('non_existent_key'))

    def test_load_from_valid_yaml_file(self):
        """Test caricamento configurazione da file YAML valido"""
        temp_file = self._write_yaml({
            'fps': 25,
            'marker_color': 'Green',
            'start_timecode': '00:00:00:00',
            'output_dir': './edl',
        })
        try:
            config = Config(config_file=temp_file)

            self.assertEqual(config.get('fps'), 25)
            self.assertEqual(config.get('marker_color'), 'Green')
            self.assertEqual(config.get('start_timecode'), '00:00:00:00')
            self.assertEqual(config.get('output_dir'), './edl')
        finally:
            os.unlink(temp_file)

    def test_load_from_nonexistent_file(self):
        """Test che il caricamento di un file inesistente non sollevi eccezioni"""
        config = Config(config_file='/path/to/nonexistent/file.yaml')
        self.assertEqual(config.get('marker_color'), 'Blue')

    def test_load_from_invalid_yaml_file(self):
        """Test gestione errori con file YAML non valido"""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            f.write("invalid: yaml: content: [")
            temp_file = f.name

        try:
            with self.assertRaises(Exception) as context:
                Config(config_file=temp_file)

            self.assertIn("Errore nel caricamento del file di configurazione", str(context.exception))
        finally:
            os.unlink(temp_file)

    def test_load_from_non_mapping_yaml_file(self):
        """Un documento YAML che non è una mappa viene rifiutato"""
        temp_file = self._write_yaml(['fps', 25])
        try:
            with self.assertRaises(Exception) as context:
                Config(config_file=temp_file)
            self.assertIn("Errore nel caricamento del file di configurazione", str(context.exception))
        finally:
            os.unlink(temp_file)

    def test_load_from_empty_yaml_file(self):
        """Test caricamento da file YAML vuoto"""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            temp_file = f.name

        try:
            config = Config(config_file=temp_file)
            self.assertEqual(config.get('fps'), 24.0)
        finally:
            os.unlink(temp_file)

    def test_configuration_precedence(self):
        """Test della precedenza: default < file < CLI"""
        temp_file = self._write_yaml({'fps': 25, 'marker_color': 'Red'})
        try:
            config = Config(config_file=temp_file)
            self.assertEqual(config.get('fps'), 25)
            self.assertEqual(config.get('start_timecode'), '01:00:00;00')  # default

            config.update_from_args({'fps': '30', 'start_timecode': None})

            self.assertEqual(config.get('fps'), '30')
            self.assertEqual(config.get('marker_color'), 'Red')
            self.assertEqual(config.get('start_timecode'), '01:00:00;00')
        finally:
            os.unlink(temp_file)

    def test_to_settings(self):
        """Le impostazioni vengono validate e normalizzate"""
        config = Config()
        config.update_from_args({'fps': '29.97', 'marker_color': 'yellow', 'start_timecode': '1'})
        settings = config.to_settings()

        self.assertEqual(settings.frames_per_second, 29.97)
        self.assertEqual(settings.marker_color, 'Yellow')
        self.assertEqual(settings.start_timecode, '1')

    def test_to_settings_invalid_values(self):
        config = Config()
        config.update_from_args({'fps': 60})
        with self.assertRaises(ValueError):
            config.to_settings()

    def test_config_immutability_via_get_all(self):
        """Test che get_all restituisca una copia e non modifichi l'originale"""
        config = Config()

        config_copy = config.get_all()
        config_copy['marker_color'] = 'Red'
        config_copy['new_key'] = 'new_value'

        self.assertEqual(config.get('marker_color'), 'Blue')
        self.assertIsNone(config.get('new_key'))

    def test_defaults_not_shared_between_instances(self):
        first = Config()
        first.config['overrides']['a.srt'] = {'fps': 25}
        self.assertEqual(Config().get('overrides'), {})


if __name__ == "__main__":
    unittest.main()
