import unittest

from core.building_mapper import building_from_dict
from core.domain.model import PORTRAIT
from core.errors import InvalidInput


def _doc():
    return {
        "center": {"latitude": 37.445, "longitude": -122.139},
        "boundingBox": {
            "ne": {"latitude": 37.4452, "longitude": -122.1387},
            "sw": {"latitude": 37.4448, "longitude": -122.1393},
        },
        "solarPotential": {
            "panelCapacityWatts": 250,
            "panelWidthMeters": 1.045,
            "panelHeightMeters": 1.879,
            "roofSegmentStats": [
                {"azimuthDegrees": 180.0, "pitchDegrees": 20.5, "stats": {"areaMeters2": 40.0}},
                {"azimuthDegrees": 90.0},
            ],
            "solarPanelConfigs": [
                {"panelsCount": 4, "yearlyEnergyDcKwh": 1500.0},
                {"panelsCount": 6, "yearlyEnergyDcKwh": 2200.0},
            ],
            "solarPanels": [
                {
                    "center": {"latitude": 37.44501, "longitude": -122.13901},
                    "orientation": "PORTRAIT",
                    "segmentIndex": 1,
                    "yearlyEnergyDcKwh": 400.0,
                },
                {
                    "center": {"latitude": 37.44502, "longitude": -122.13902},
                    "segmentIndex": 0,
                    "yearlyEnergyDcKwh": 380.0,
                    "orientationDegrees": 12.0,
                },
            ],
        },
    }


class TestBuildingFromDict(unittest.TestCase):
    def test_documento_completo(self):
        b = building_from_dict(_doc())

        self.assertEqual(2, len(b.configs))
        self.assertEqual(6, b.configs[1].panels_count)
        self.assertEqual(2200.0, b.configs[1].yearly_energy_dc_kwh)

        self.assertEqual(PORTRAIT, b.panels[0].orientation)
        self.assertEqual(1, b.panels[0].roof_segment_index)
        self.assertEqual(0.0, b.panels[0].orientation_degrees)
        self.assertEqual("LANDSCAPE", b.panels[1].orientation)
        self.assertEqual(12.0, b.panels[1].orientation_degrees)

        self.assertEqual(180.0, b.segments[0].azimuth_degrees)
        self.assertEqual(40.0, b.segments[0].area_m2)
        self.assertEqual(0.0, b.segments[1].pitch_degrees)

        self.assertEqual(250.0, b.panel_capacity_watts)
        self.assertEqual((37.445, -122.139), b.center)
        self.assertEqual((37.4452, -122.1387), b.bounding_box.ne)

    def test_opcionales_ausentes(self):
        doc = _doc()
        del doc["center"]
        del doc["boundingBox"]
        b = building_from_dict(doc)
        self.assertIsNone(b.center)
        self.assertIsNone(b.bounding_box)

    def test_claves_obligatorias(self):
        for path in (
            ("solarPotential",),
            ("solarPotential", "panelWidthMeters"),
            ("solarPotential", "panelCapacityWatts"),
        ):
            doc = _doc()
            target = doc
            for k in path[:-1]:
                target = target[k]
            del target[path[-1]]
            with self.assertRaises(InvalidInput):
                building_from_dict(doc)

    def test_panel_sin_segmento(self):
        doc = _doc()
        del doc["solarPotential"]["solarPanels"][0]["segmentIndex"]
        with self.assertRaises(InvalidInput) as ctx:
            building_from_dict(doc)
        self.assertIn("segmentIndex", str(ctx.exception))

    def test_valor_no_numerico(self):
        doc = _doc()
        doc["solarPotential"]["solarPanelConfigs"][0]["yearlyEnergyDcKwh"] = "mucho"
        with self.assertRaises(InvalidInput):
            building_from_dict(doc)

    def test_orientacion_invalida(self):
        doc = _doc()
        doc["solarPotential"]["solarPanels"][0]["orientation"] = "diagonal"
        with self.assertRaises(InvalidInput):
            building_from_dict(doc)


if __name__ == "__main__":
    unittest.main()
