import unittest

from core.errors import InvalidInput
from layers.animation import AnimationScheduler
from layers.overlay import OverlayKind, is_animated, overlay_spec, scheduler_for, visible_overlays
from layers.raster import raster_stats, render_palette
from layout.palettes import IRON, SUNLIGHT, get_palette

BW = ["000000", "ffffff"]


class TestOverlay(unittest.TestCase):
    def test_capas_animadas(self):
        self.assertEqual(12, overlay_spec(OverlayKind.MONTHLY_FLUX).animation_bound)
        self.assertEqual(24, overlay_spec(OverlayKind.HOURLY_SHADE).animation_bound)
        self.assertEqual(5, overlay_spec("hourlyShade").initial_index)
        self.assertTrue(is_animated("monthlyFlux"))
        self.assertFalse(is_animated(OverlayKind.ANNUAL_FLUX))
        self.assertFalse(is_animated(OverlayKind.NONE))

    def test_paletas(self):
        self.assertEqual(get_palette(IRON), overlay_spec(OverlayKind.ANNUAL_FLUX).palette)
        self.assertEqual(get_palette(SUNLIGHT), overlay_spec(OverlayKind.HOURLY_SHADE).palette)
        self.assertEqual((), overlay_spec(OverlayKind.RGB).palette)

    def test_tipo_desconocido(self):
        with self.assertRaises(InvalidInput):
            overlay_spec("thermal")

    def test_visible_overlays(self):
        self.assertEqual([False, False, True, False], visible_overlays("monthlyFlux", 4, 2))
        self.assertEqual([True, False, False], visible_overlays(OverlayKind.DSM, 3, 2))
        self.assertEqual([False, False], visible_overlays(OverlayKind.NONE, 2, 0))
        self.assertEqual([], visible_overlays(OverlayKind.MASK, 0, 0))

    def test_scheduler_for(self):
        s = scheduler_for(OverlayKind.HOURLY_SHADE)
        self.assertIsInstance(s, AnimationScheduler)
        self.assertEqual(5, s.index)
        self.assertFalse(s.playing)
        with self.assertRaises(InvalidInput):
            scheduler_for(OverlayKind.ANNUAL_FLUX)


class TestRaster(unittest.TestCase):
    def test_raster_stats(self):
        values = [[3.0, -9999.0], [float("nan"), 7.5]]
        self.assertEqual((3.0, 7.5), raster_stats(values, no_data=-9999.0))
        with self.assertRaises(InvalidInput):
            raster_stats([[-9999.0]], no_data=-9999.0)

    def test_render_palette(self):
        out = render_palette([[0.0, 5.0], [10.0, -9999.0]], BW, 0.0, 10.0, no_data=-9999.0)
        self.assertEqual([["#000000", "#808080"], ["#ffffff", None]], out)

    def test_clamp_fuera_de_rango(self):
        out = render_palette([[-5.0, 50.0]], BW, 0.0, 10.0)
        self.assertEqual([["#000000", "#ffffff"]], out)

    def test_rango_degenerado(self):
        self.assertEqual([["#ffffff", "#ffffff"]], render_palette([[1.0, 2.0]], BW, 3.0, 3.0))

    def test_mascara(self):
        out = render_palette([[0.0, 1.0], [1.0, 0.0]], BW, mask=[[1, 0], [1, 1]])
        self.assertEqual([["#000000", None], ["#ffffff", "#000000"]], out)
        with self.assertRaises(InvalidInput):
            render_palette([[0.0, 1.0]], BW, mask=[[1]])


if __name__ == "__main__":
    unittest.main()
