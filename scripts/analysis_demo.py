from beam_load.domain.beam import BeamConfig, SupportCondition
from beam_load.domain.cases import BeamCase
from beam_load.domain.loads import Load
from beam_load.domain.sections import Rectangular
from beam_load.engine.analysis import run_analysis
from beam_load.materials.material_db import MaterialDB

db = MaterialDB.default()

case = BeamCase(
    beam=BeamConfig(length_mm=1000, support=SupportCondition.SIMPLY_SUPPORTED, left_support_mm=0, right_support_mm=1000),
    load=Load.point(1000, 500),                  # 1000 N en x=500 mm
    section=Rectangular(width_mm=100, height_mm=200),
    material=db.get("ASTM A36 Structural Steel"),
)

res = run_analysis(case)
r = res.results
print("R1 [N] =", res.reactions.left_n)
print("R2 [N] =", res.reactions.right_n)
print("Vmax [N] =", r.max_shear_force_n)
print("Mmax [N·mm] =", r.max_bending_moment_nmm)
print("σmax [MPa] =", r.max_normal_stress_mpa)
print("τmax [MPa] =", r.max_shear_stress_mpa)
print("FS =", r.safety_factor)
print("Peso propio [N] =", r.beam_weight_n)
print("CG [mm] =", r.center_of_gravity_mm)
print("M(x) primeras muestras:", res.moment.points()[:3])
