# examples/two_charges.py
from charge_sim.simulation import Simulation
from charge_sim.types import Particle

a = Particle(charge=10, radius=1.0, position=(350.0, 300.0), velocity=(0.0, 1.0))
b = Particle(charge=20, radius=2.0, position=(450.0, 300.0), velocity=(0.0, -0.5))
sim = Simulation([a, b], width=800, height=600)

e0 = sim.capture_energy()
for _ in range(500):
    sim.step()

print("t:", sim.time)
print("a pos", a.position, "v", a.velocity)
print("b pos", b.position, "v", b.velocity)
print("E0", e0, "E", sim.total_energy(), "dE", sim.total_energy() - e0)
