"""
Quantum randomness for the password generator.

QuantumEngine samples qubits held in superposition on the local Aer
simulator. QuantumRandomSource turns those samples into uniform indices so
it can replace the default secure source.
"""

from __future__ import annotations

import logging
import threading
from typing import List

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import DEFAULT_QUANTUM_CONFIG, QuantumSourceConfig
from .entropy import amplify_entropy, bits_to_int
from .errors import InvalidArgumentError, QuantumEngineError

logger = logging.getLogger(__name__)


class QuantumEngine:
    """
    Builds and runs the sampling circuit; one shot gives one bit per qubit.
    """

    def __init__(self, config: QuantumSourceConfig | None = None) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        if self.config.num_qubits <= 0:
            raise QuantumEngineError("num_qubits must be positive")

        # Local simulator backend.
        self.backend = AerSimulator()

        # Safety: ensure requested num_qubits does not exceed backend capability.
        backend_cfg = self.backend.configuration()
        max_qubits = getattr(backend_cfg, "n_qubits", None)

        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise QuantumEngineError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits}). "
                "Lower num_qubits in QuantumSourceConfig."
            )

    def build_circuit(self) -> tuple[QuantumCircuit, list[str]]:
        """
        Prepare N qubits in superposition, then measure them
        in alternating bases (Z, X, Z, X, ...).
        """
        qubits = range(self.config.num_qubits)
        x_basis = [q for q in qubits if q % 2 == 1]

        qc = QuantumCircuit(len(qubits), len(qubits))
        qc.h(qubits)
        # A second H on odd qubits reads them out in the X basis.
        if x_basis:
            qc.h(x_basis)
        qc.measure(qubits, qubits)

        basis = ["X" if q % 2 else "Z" for q in qubits]
        return qc, basis

    def sample_bits(self) -> List[int]:
        """
        Run the circuit once (a single shot) and return one bit per qubit,
        index 0 being the first qubit.
        """
        qc, _basis = self.build_circuit()
        tqc = transpile(qc, self.backend)

        counts = self.backend.run(tqc, shots=1).result().get_counts()
        bitstring = next(iter(counts.keys()))

        # Qiskit orders bits as [q_(n-1) ... q_0].
        return [int(b) for b in reversed(bitstring)]

    def sample_combined_bits(self) -> List[int]:
        """
        XOR together ``quantum_streams`` independent samples.
        """
        combined: list[int] | None = None
        for _ in range(max(1, self.config.quantum_streams)):
            bits = self.sample_bits()
            if combined is None:
                combined = bits
                continue
            if len(bits) != len(combined):
                raise QuantumEngineError(
                    "Quantum streams produced different bit-lengths"
                )
            combined = [b ^ c for b, c in zip(bits, combined)]

        assert combined is not None
        return combined


class QuantumRandomSource:
    """
    RandomSource backed by QuantumEngine samples mixed with SHA-256.

    Bits are buffered; each ``randbelow`` call consumes just enough of them
    and discards out-of-range draws, so indices stay uniform. Each engine
    sample contributes at most as many bits as it measured.
    """

    def __init__(
        self,
        config: QuantumSourceConfig | None = None,
        engine: QuantumEngine | None = None,
    ) -> None:
        self.engine = engine or QuantumEngine(config)
        self.config = self.engine.config
        self._buffer: list[int] = []
        self._lock = threading.Lock()

    def _refill(self) -> None:
        raw = self.engine.sample_combined_bits()
        # Hashing mixes but adds no entropy: never serve more bits than were measured.
        mixed = amplify_entropy(raw, self.config.entropy_rounds)
        self._buffer.extend(mixed[: len(raw)])
        logger.debug("Quantum bit buffer refilled to %d bits", len(self._buffer))

    def _take_bits(self, count: int) -> list[int]:
        while len(self._buffer) < count:
            self._refill()
        taken = self._buffer[:count]
        del self._buffer[:count]
        return taken

    def randbelow(self, bound: int) -> int:
        if bound <= 0:
            raise InvalidArgumentError(f"bound must be positive, got {bound}")
        if bound == 1:
            return 0

        width = (bound - 1).bit_length()
        with self._lock:
            while True:
                value = bits_to_int(self._take_bits(width))
                if value < bound:
                    return value

    def __repr__(self) -> str:
        return (
            f"QuantumRandomSource(num_qubits={self.config.num_qubits}, "
            f"streams={self.config.quantum_streams}, "
            f"rounds={self.config.entropy_rounds})"
        )
