"""Static physics reference table shown in the client's formulas panel."""

FORMULA_SECTIONS = [
    {
        "key": "mechanics",
        "title": "Classical Mechanics",
        "formulas": [
            ("Newton's Second Law", "F = ma", "Force equals mass times acceleration"),
            ("Kinematic Equation", "v² = u² + 2as", "Final velocity squared"),
            ("Work-Energy Theorem", "W = ΔKE = ½mv² - ½mu²", "Work equals change in kinetic energy"),
            ("Momentum", "p = mv", "Momentum equals mass times velocity"),
            ("Impulse", "J = FΔt = Δp", "Impulse equals force times time"),
            ("Gravitational Force", "F = G(m₁m₂)/r²", "Universal gravitation"),
            ("Centripetal Force", "F = mv²/r", "Force toward center of circular motion"),
            ("Simple Harmonic Motion", "x = A cos(ωt + φ)", "Position in SHM"),
        ],
    },
    {
        "key": "thermodynamics",
        "title": "Thermodynamics",
        "formulas": [
            ("First Law", "ΔU = Q - W", "Change in internal energy"),
            ("Ideal Gas Law", "PV = nRT", "Pressure, volume, temperature relation"),
            ("Heat Transfer", "Q = mcΔT", "Heat equals mass times specific heat times temperature change"),
            ("Efficiency", "η = W/Qₕ = 1 - Qc/Qₕ", "Carnot engine efficiency"),
            ("Entropy Change", "ΔS = ∫(dQ/T)", "Change in entropy"),
            ("Stefan-Boltzmann Law", "j = σT⁴", "Blackbody radiation"),
        ],
    },
    {
        "key": "electromagnetism",
        "title": "Electromagnetism",
        "formulas": [
            ("Coulomb's Law", "F = kq₁q₂/r²", "Electric force between charges"),
            ("Electric Field", "E = F/q = kQ/r²", "Electric field strength"),
            ("Ohm's Law", "V = IR", "Voltage equals current times resistance"),
            ("Power", "P = VI = I²R = V²/R", "Electrical power"),
            ("Magnetic Force", "F = qvB sin θ", "Force on moving charge in magnetic field"),
            ("Faraday's Law", "ε = -dΦ/dt", "Induced EMF"),
            ("Capacitance", "C = Q/V", "Capacitor charge storage"),
            ("Maxwell's Equations", "∇·E = ρ/ε₀", "Gauss's law for electricity"),
        ],
    },
    {
        "key": "waves",
        "title": "Waves & Optics",
        "formulas": [
            ("Wave Equation", "v = fλ", "Velocity equals frequency times wavelength"),
            ("Snell's Law", "n₁ sin θ₁ = n₂ sin θ₂", "Refraction of light"),
            ("Mirror Equation", "1/f = 1/do + 1/di", "Spherical mirror formula"),
            ("Lens Equation", "1/f = 1/do + 1/di", "Thin lens formula"),
            ("Doppler Effect", "f' = f(v ± vo)/(v ± vs)", "Frequency shift due to motion"),
            ("Interference", "δ = d sin θ", "Path difference for interference"),
            ("Diffraction Grating", "d sin θ = mλ", "Grating equation"),
        ],
    },
    {
        "key": "modern",
        "title": "Modern Physics",
        "formulas": [
            ("Mass-Energy", "E = mc²", "Einstein's mass-energy equivalence"),
            ("Planck's Equation", "E = hf", "Energy of a photon"),
            ("De Broglie Wavelength", "λ = h/p", "Matter wave wavelength"),
            ("Photoelectric Effect", "hf = φ + KEmax", "Einstein's photoelectric equation"),
            ("Uncertainty Principle", "Δx Δp ≥ ℏ/2", "Heisenberg uncertainty relation"),
            ("Schrödinger Equation", "iℏ ∂ψ/∂t = Ĥψ", "Time-dependent Schrödinger equation"),
            ("Lorentz Factor", "γ = 1/√(1 - v²/c²)", "Special relativity factor"),
        ],
    },
]


def formula_sections():
    return [
        {
            "key": section["key"],
            "title": section["title"],
            "formulas": [
                {"name": name, "formula": formula, "description": description}
                for name, formula, description in section["formulas"]
            ],
        }
        for section in FORMULA_SECTIONS
    ]
