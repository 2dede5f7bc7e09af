import tempfile
import unittest
from pathlib import Path

from core.configuration import build_effective_config, load_configuration
from core.domain.model import (
    BuildingInsights,
    FinancialInputs,
    PanelConfiguration,
    PanelPlacement,
    RoofSegmentStats,
)
from core.errors import InvalidInput
from core.orchestrator import animate_overlay, compare_configurations, compare_installation
from core.services.finance import project_financials
from layers.overlay import OverlayKind
from layout.placement import place_panels
from reports.cost_chart import generar_cost_chart
from reports.panel_layout import generar_panel_layout


def _building(capacity=400.0):
    panels = [
        PanelPlacement(
            center_lat=37.4450 + (i // 4) * 0.000018,
            center_lng=-122.1390 + (i % 4) * 0.000013,
            orientation_degrees=0.0,
            roof_segment_index=i % 2,
            yearly_energy_dc_kwh=500.0 - 10 * i,
        )
        for i in range(8)
    ]
    return BuildingInsights(
        configs=[
            PanelConfiguration(panels_count=2, yearly_energy_dc_kwh=2000.0),
            PanelConfiguration(panels_count=4, yearly_energy_dc_kwh=6000.0),
            PanelConfiguration(panels_count=8, yearly_energy_dc_kwh=9000.0),
        ],
        panels=panels,
        segments=[RoofSegmentStats(azimuth_degrees=180.0), RoofSegmentStats(azimuth_degrees=0.0)],
        panel_width_m=1.045,
        panel_height_m=1.879,
        panel_capacity_watts=capacity,
    )


def _inputs(**kw):
    base = dict(monthly_bill=100.0, cost_per_kwh=0.3, lifespan_years=20)
    base.update(kw)
    return FinancialInputs(**base)


class TestCompareInstallation(unittest.TestCase):
    def test_flujo_completo(self):
        # consumo 4000 kWh: 2000*0.85 no alcanza, 6000*0.85 sí
        r = compare_installation(_building(), _inputs())
        self.assertEqual(1, r.config_index)
        self.assertEqual(4, len(r.polygons))
        self.assertEqual(project_financials(r.config, _inputs()), r.projection)
        self.assertEqual(20, len(r.projection.yearly_utility_bill))
        self.assertEqual("#1a237e", r.polygons[0].fill_color)

    def test_color_escalado_con_todo_el_techo(self):
        b = _building()
        r = compare_installation(b, _inputs())
        techo = place_panels(b.panels, b.segments, b.panel_width_m, b.panel_height_m)
        self.assertEqual([p.fill_color for p in techo[:4]], [p.fill_color for p in r.polygons])
        self.assertEqual([p.points for p in techo[:4]], [p.points for p in r.polygons])
        # el panel más débil mostrado no es el más débil del techo
        self.assertNotEqual("#e8eaf6", r.polygons[-1].fill_color)
        self.assertEqual("#e8eaf6", techo[-1].fill_color)

    def test_potencia_del_panel_relativa_al_edificio(self):
        # consumo 3000 kWh; con paneles de 800 W sobre 400 W la primera ya alcanza
        self.assertEqual(1, compare_installation(_building(), _inputs(monthly_bill=75.0)).config_index)
        r = compare_installation(_building(), _inputs(monthly_bill=75.0, panel_capacity_watts=800.0))
        self.assertEqual(0, r.config_index)
        self.assertAlmostEqual(2000.0 * 2 * 0.85, r.projection.initial_ac_kwh)

        # la potencia por defecto la fija el edificio, no las entradas
        r = compare_installation(_building(capacity=800.0), _inputs(monthly_bill=75.0, panel_capacity_watts=800.0))
        self.assertEqual(1, r.config_index)

    def test_ninguna_alcanza(self):
        r = compare_installation(_building(), _inputs(monthly_bill=1000.0))
        self.assertEqual(2, r.config_index)
        self.assertEqual(8, len(r.polygons))

    def test_paleta_y_orientacion(self):
        bw = ["#000000", "#ffffff"]
        b = _building()
        r = compare_installation(b, _inputs(monthly_bill=1000.0), orientation="PORTRAIT", palette=bw)
        self.assertEqual("#ffffff", r.polygons[0].fill_color)
        self.assertEqual("#000000", r.polygons[-1].fill_color)
        ref = place_panels(b.panels, b.segments, b.panel_width_m, b.panel_height_m, orientation="PORTRAIT")
        self.assertEqual(ref[0].points, r.polygons[0].points)

    def test_estilo_de_trazo_desde_configuracion(self):
        style = {"palette": "panels", "stroke_color": "#101010", "stroke_opacity": 0.4, "fill_opacity": "0.6"}
        r = compare_installation(_building(), _inputs(), panel_style=style)
        for p in r.polygons:
            self.assertEqual("#101010", p.stroke_color)
            self.assertEqual(0.4, p.stroke_opacity)
            self.assertEqual(0.6, p.fill_opacity)

    def test_estilo_por_defecto_del_repo(self):
        cfg = load_configuration()
        r = compare_installation(_building(), _inputs(), panel_style=cfg.panel_style)
        self.assertEqual("#B0BEC5", r.polygons[0].stroke_color)
        self.assertEqual(0.9, r.polygons[0].fill_opacity)

    def test_entradas_invalidas(self):
        with self.assertRaises(InvalidInput):
            compare_installation(_building(), _inputs(lifespan_years=0))
        with self.assertRaises(ZeroDivisionError):
            compare_installation(_building(), _inputs(cost_per_kwh=0.0))

    def test_compare_configurations(self):
        out = compare_configurations(_building(), _inputs())
        self.assertEqual([0, 1, 2], [i for i, _ in out])
        self.assertLess(out[0][1].installation_cost, out[2][1].installation_cost)


class _Timer:
    def __init__(self, interval, function, args=()):
        self.interval = interval
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True


class TestAnimateOverlay(unittest.TestCase):
    def setUp(self):
        self.timers = []

    def _factory(self, *args, **kwargs):
        timer = _Timer(*args, **kwargs)
        self.timers.append(timer)
        return timer

    def test_periodo_desde_configuracion(self):
        cfg = build_effective_config(load_configuration(), {"visualization": {"animation": {"period_ms": 250}}})
        s = animate_overlay(OverlayKind.HOURLY_SHADE, cfg, timer_factory=self._factory)
        self.assertTrue(s.playing)
        self.assertEqual((5, 24), (s.index, s.bound))
        self.assertEqual(0.25, self.timers[0].interval)
        s.stop()
        self.assertTrue(self.timers[0].cancelled)

    def test_periodo_por_defecto(self):
        s = animate_overlay("monthlyFlux", load_configuration(), timer_factory=self._factory)
        self.assertEqual(12, s.bound)
        self.assertEqual(1.0, self.timers[0].interval)
        s.stop()

    def test_capa_estatica(self):
        with self.assertRaises(InvalidInput):
            animate_overlay(OverlayKind.DSM, load_configuration(), timer_factory=self._factory)
        self.assertEqual([], self.timers)


class TestReportes(unittest.TestCase):
    def test_genera_pngs(self):
        r = compare_installation(_building(), _inputs())
        with tempfile.TemporaryDirectory() as d:
            chart = generar_cost_chart(r.projection, Path(d) / "costos.png", start_year=2026)
            layout = generar_panel_layout(r.polygons, Path(d) / "sub" / "layout.png")
            self.assertTrue(Path(chart).exists())
            self.assertTrue(Path(layout).exists())
            self.assertGreater(Path(layout).stat().st_size, 0)

    def test_layout_vacio(self):
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(ValueError):
                generar_panel_layout([], Path(d) / "x.png")


if __name__ == "__main__":
    unittest.main()
