# path: scripts/export_report_demo.py
import os
import sys
import tempfile

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from beam_load.services.logging_setup import setup_logging
logger = setup_logging()

from beam_load.domain.beam import BeamConfig, SupportCondition
from beam_load.domain.cases import BeamCase
from beam_load.domain.loads import Load
from beam_load.domain.sections import IBeam
from beam_load.engine.analysis import run_analysis
from beam_load.materials.material_db import MaterialDB, default_materials_path
from beam_load.services.report_pdf import ReportHeader, build_report_images, export_report_pdf


def main(out_pdf: str = "beam_analysis_report.pdf") -> None:
    db = MaterialDB.from_txt(default_materials_path())
    case = BeamCase(
        beam=BeamConfig(length_mm=3000, support=SupportCondition.CANTILEVER),
        load=Load.uniform(2.0, 1000, 3000),      # 2 N/mm sobre [1000, 3000] mm
        section=IBeam(flange_width_mm=100, flange_thickness_mm=10, web_thickness_mm=6, height_mm=200),
        material=db.get("ASTM A992 Structural Steel"),
    )
    analysis = run_analysis(case)

    with tempfile.TemporaryDirectory() as td:
        imgs = build_report_images(analysis, td)
        export_report_pdf(out_pdf, analysis, header=ReportHeader(project="Demo"), images=imgs)
    logger.info("Listo: %s", os.path.abspath(out_pdf))


if __name__ == "__main__":
    main(*sys.argv[1:2])
