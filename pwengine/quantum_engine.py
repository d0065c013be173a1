"""
Quantum engine: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and turns the measured bits into
unbiased alphabet indices.
"""

from __future__ import annotations

import logging
from typing import List, Protocol

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import EngineConfig, DEFAULT_CONFIG
from .entropy import amplify_entropy, bits_to_int

logger = logging.getLogger(__name__)

MAX_QUBITS = 64


class BitProvider(Protocol):
    def get_raw_bits(self) -> List[int]:
        ...


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

        if not 1 <= self.config.num_qubits <= MAX_QUBITS:
            raise ValueError(
                f"Configured num_qubits={self.config.num_qubits} is outside "
                f"[1, {MAX_QUBITS}]. Adjust num_qubits in EngineConfig."
            )
        if self.config.quantum_shots < 1:
            raise ValueError("quantum_shots must be at least 1.")

        # Local simulator backend.
        self.backend = AerSimulator()

    def _build_circuit(self) -> tuple[QuantumCircuit, list[str]]:
        """
        Prepare N qubits with H, then measure even qubits in Z and odd
        qubits in X (extra H before measurement).
        """
        n = self.config.num_qubits
        qc = QuantumCircuit(n, n)
        qc.h(range(n))

        measurement_basis: list[str] = []
        for i in range(n):
            if i % 2 == 1:
                measurement_basis.append("X")
                qc.h(i)
            else:
                measurement_basis.append("Z")
            qc.measure(i, i)

        return qc, measurement_basis

    def get_raw_bits_with_meta(self) -> tuple[list[int], list[str], QuantumCircuit]:
        """
        Run the circuit `quantum_shots` times and return:
        - the measured bits of every shot, concatenated
        - the measurement basis per qubit ("Z" or "X")
        - the circuit that was run
        """
        qc, measurement_basis = self._build_circuit()
        tqc = transpile(qc, self.backend)

        result = self.backend.run(
            tqc, shots=self.config.quantum_shots, memory=True
        ).result()

        bits: list[int] = []
        for shot in result.get_memory():
            # Qiskit orders bits as [q_(n-1) ... q_0]; reverse so index 0 is first qubit.
            bits.extend(int(b) for b in shot.replace(" ", "")[::-1])

        logger.debug(
            "Quantum engine produced %d bits from %d shots",
            len(bits),
            self.config.quantum_shots,
        )
        return bits, measurement_basis, qc

    def get_raw_bits(self) -> list[int]:
        bits, _basis, _circuit = self.get_raw_bits_with_meta()
        return bits


class QuantumIndexSource:
    """
    Uniform indices drawn from quantum measurement bits.

    Bits are buffered in a pool. Each refill runs the engine once and,
    when entropy_rounds > 0, mixes the batch through SHA-256. A refill never
    adds more bits than the engine measured, so a small batch is not
    stretched into a full digest. Indices use rejection sampling, so there
    is no modulo bias.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        engine: BitProvider | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.engine = engine or QuantumEngine(self.config)
        self._pool: list[int] = []

    def _refill(self) -> None:
        raw = self.engine.get_raw_bits()
        if not raw:
            raise ValueError("Quantum engine returned no bits.")
        mixed = amplify_entropy(raw, self.config.entropy_rounds)
        self._pool.extend(mixed[: len(raw)])

    def take_bits(self, k: int) -> list[int]:
        while len(self._pool) < k:
            self._refill()
        bits, self._pool = self._pool[:k], self._pool[k:]
        return bits

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"Upper bound must be positive, got {n}.")
        if n == 1:
            return 0

        width = (n - 1).bit_length()
        while True:
            value = bits_to_int(self.take_bits(width))
            if value < n:
                return value
