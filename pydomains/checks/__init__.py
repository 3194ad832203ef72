from .interval import IntervalAxiomChecks
