"""
Tests for tour path generation and the angle policies.
"""

import numpy as np
import pandas as pd
import pytest

import manual_tours.tours.path as tour_path_module
from manual_tours import (
    FixedAngleStep,
    FixedFrameCount,
    InvalidArgument,
    NumericDegenerate,
    TourConfig,
    TourPath,
    basis_random,
    manip_var_of,
    manual_tour,
    radial_tour,
    sweep_tour,
)
from manual_tours.tours.path import phi_start_of


def in_plane_norm(frame, k):
    return float(np.hypot(frame[k - 1, 0], frame[k - 1, 1]))


def basis_with_row(p, k, b1, b2):
    """An orthonormal (p, 2) basis whose k-th row is (b1, b2)."""
    a1 = np.sqrt(1.0 - b1**2)
    a2 = -b1 * b2 / a1
    a3 = np.sqrt(1.0 - b2**2 - a2**2)
    rest = [i for i in range(p) if i != k - 1]

    B = np.zeros((p, 2))
    B[k - 1] = [b1, b2]
    B[rest[0]] = [a1, a2]
    B[rest[1], 1] = a3
    return B


class TestFixedFrameCount:
    """Exactly n_slides frames, steps split evenly across legs."""

    def test_frame_count_and_leg_boundaries(self):
        legs = [(0.3, 0.0), (0.0, 1.5), (1.5, 0.3)]
        path = FixedFrameCount(n_slides=20).phi_path(legs)

        # 19 steps -> 7, 6, 6
        assert len(path) == 20
        assert path[0] == 0.3
        assert path[7] == 0.0
        assert path[13] == 1.5
        assert path[-1] == 0.3

    def test_legs_are_monotonic(self):
        path = FixedFrameCount(n_slides=16).phi_path([(0.3, 0.0), (0.0, 1.5), (1.5, 0.3)])
        assert np.all(np.diff(path[:6]) <= 0)
        assert np.all(np.diff(path[5:11]) >= 0)
        assert np.all(np.diff(path[10:]) <= 0)

    def test_too_few_slides_for_legs(self):
        with pytest.raises(InvalidArgument, match="too small"):
            FixedFrameCount(n_slides=3).phi_path([(0, 1), (1, 2), (2, 0)])

    @pytest.mark.parametrize("bad", [1, 0, True, 2.5])
    def test_invalid_n_slides(self, bad):
        with pytest.raises(InvalidArgument):
            FixedFrameCount(n_slides=bad)


class TestFixedAngleStep:
    """Constant angular steps, remainder folded into a final partial step."""

    def test_single_leg_lands_on_endpoint(self):
        path = FixedAngleStep(angle=0.3).phi_path([(0.0, 1.0)])
        assert np.allclose(path, [0.0, 0.3, 0.6, 0.9, 1.0])
        assert path[-1] == 1.0

    def test_exact_multiple_has_no_extra_step(self):
        path = FixedAngleStep(angle=0.1).phi_path([(0.0, 0.3)])
        assert len(path) == 4
        assert path[-1] == 0.3

    def test_shared_boundaries_appear_once(self):
        legs = [(0.5, 0.0), (0.0, 1.0), (1.0, 0.5)]
        path = FixedAngleStep(angle=0.25).phi_path(legs)
        assert np.allclose(path, [0.5, 0.25, 0.0, 0.25, 0.5, 0.75, 1.0, 0.75, 0.5])

    def test_steps_never_exceed_angle(self):
        legs = [(0.7, 0.0), (0.0, 1.4), (1.4, 0.7)]
        path = FixedAngleStep(angle=0.13).phi_path(legs)
        assert np.max(np.abs(np.diff(path))) <= 0.13 + 1e-12

    def test_zero_length_legs_add_nothing(self):
        path = FixedAngleStep(angle=0.1).phi_path([(0.4, 0.4), (0.4, 0.4), (0.4, 0.4)])
        assert np.array_equal(path, [0.4])

    @pytest.mark.parametrize("bad", [0.0, -0.1, np.inf])
    def test_invalid_angle(self, bad):
        with pytest.raises(InvalidArgument):
            FixedAngleStep(angle=bad)

    def test_legs_must_be_contiguous(self):
        with pytest.raises(InvalidArgument, match="contiguous"):
            FixedAngleStep().phi_path([(0.0, 1.0), (0.5, 0.0)])


class TestManualTour:
    """phi_start -> phi_min -> phi_max -> phi_start."""

    def test_six_variable_twenty_frame_tour(self, basis):
        tour = manual_tour(basis, 4, phi_min=0.0, phi_max=np.pi / 2, policy=FixedFrameCount(n_slides=20))

        assert isinstance(tour, TourPath)
        assert len(tour) == 20
        assert tour.frames.shape == (20, 6, 2)
        assert tour.manip_var == 4
        for frame in tour:
            assert np.max(np.abs(frame.T @ frame - np.eye(2))) < 1e-10
        assert np.allclose(tour[0], basis, atol=1e-10)

    def test_round_trip_returns_to_basis(self, basis):
        tour = manual_tour(basis, 2)
        assert np.allclose(tour[0], basis, atol=1e-10)
        assert np.allclose(tour[-1], basis, atol=1e-10)

    def test_reaches_phi_min_and_phi_max(self, basis):
        tour = manual_tour(basis, 4, policy=FixedFrameCount(n_slides=20))
        i_min = int(np.argmin(tour.phis))
        i_max = int(np.argmax(tour.phis))

        assert tour.phis[i_min] == 0.0
        assert tour.phis[i_max] == pytest.approx(np.pi / 2)
        # phi = 0: fully in plane; phi = pi/2: fully out of plane
        assert in_plane_norm(tour[i_min], 4) == pytest.approx(1.0)
        assert in_plane_norm(tour[i_max], 4) == pytest.approx(0.0, abs=1e-10)

    @pytest.mark.parametrize("seed", range(10))
    def test_in_plane_norm_tracks_target_phi(self, seed):
        rng = np.random.default_rng(seed)
        B = basis_random(5, 2, rng=rng)
        k = int(rng.integers(1, 6))
        tour = manual_tour(B, k, policy=FixedFrameCount(n_slides=12))

        norms = np.array([in_plane_norm(f, k) for f in tour])
        assert np.allclose(norms, np.cos(tour.phis), atol=1e-10)

    def test_degenerate_single_point_path(self, basis):
        phi_s = phi_start_of(basis, 3)
        tour = manual_tour(basis, 3, phi_min=phi_s, phi_max=phi_s, policy=FixedFrameCount(n_slides=8))

        assert len(tour) == 8
        for frame in tour:
            assert np.allclose(frame, tour[0])

    def test_phi_min_above_start_fails_before_rotating(self, basis, monkeypatch):
        def _no_rotation(*args, **kwargs):
            raise AssertionError("rotation attempted")

        monkeypatch.setattr(tour_path_module, "rotate_manip_space", _no_rotation)
        phi_s = phi_start_of(basis, 4)
        with pytest.raises(InvalidArgument, match="phi_min <= phi_start <= phi_max"):
            manual_tour(basis, 4, phi_min=phi_s + 0.1, phi_max=phi_s + 0.5)

    def test_phi_max_below_start_fails(self, basis):
        phi_s = phi_start_of(basis, 4)
        with pytest.raises(InvalidArgument, match="phi_min <= phi_start <= phi_max"):
            manual_tour(basis, 4, phi_min=0.0, phi_max=0.5 * phi_s)

    @pytest.mark.parametrize("bad", [0, 7])
    def test_manip_var_out_of_range(self, basis, bad):
        with pytest.raises(InvalidArgument, match="out of range"):
            manual_tour(basis, bad)

    def test_manip_var_by_name(self, labeled_basis):
        tour = manual_tour(labeled_basis, "aede1")
        assert tour.manip_var == 4
        assert tour.labels[3] == "aede1"

    def test_requires_two_columns(self):
        with pytest.raises(InvalidArgument, match=r"\(p, 2\)"):
            manual_tour(np.eye(5, 3), 1)

    def test_requires_three_variables(self):
        with pytest.raises(InvalidArgument, match="at least 3"):
            manual_tour(np.eye(2), 1)

    def test_theta_overrides_manip_type(self, basis):
        tour = manual_tour(basis, 2, manip_type="vertical", theta=0.3)
        assert tour.theta == 0.3

    def test_manip_type_theta(self, basis):
        assert manual_tour(basis, 2, manip_type="Horizontal").theta == 0.0
        assert manual_tour(basis, 2, manip_type="vertical").theta == pytest.approx(np.pi / 2)
        b = basis[1]
        assert manual_tour(basis, 2).theta == pytest.approx(np.arctan2(b[1], b[0]))

    def test_unknown_manip_type(self, basis):
        with pytest.raises(InvalidArgument, match="manip_type"):
            manual_tour(basis, 2, manip_type="diagonal")

    def test_neither_theta_nor_manip_type(self, basis):
        with pytest.raises(InvalidArgument, match="Either theta or manip_type"):
            manual_tour(basis, 2, manip_type=None)

    def test_unknown_option(self, basis):
        with pytest.raises(InvalidArgument, match="Unknown manual_tour option"):
            manual_tour(basis, 2, n_frames=10)

    @pytest.mark.parametrize("option", ["phi_min", "phi_max"])
    def test_non_numeric_phi_is_not_an_unknown_option(self, basis, option):
        with pytest.raises(InvalidArgument, match=f"{option} must be a real number"):
            manual_tour(basis, 2, **{option: None})

    def test_misspelled_option_is_named(self, basis):
        with pytest.raises(InvalidArgument, match=r"\['phi_mx'\]"):
            manual_tour(basis, 2, phi_min=0.0, phi_mx=1.0)

    def test_horizontal_keeps_y_coefficient(self, basis):
        tour = manual_tour(basis, 3, manip_type="horizontal")
        assert np.allclose(tour.frames[:, 2, 1], basis[2, 1])

    def test_vertical_keeps_x_coefficient(self, basis):
        tour = manual_tour(basis, 3, manip_type="vertical")
        assert np.allclose(tour.frames[:, 2, 0], basis[2, 0])

    def test_non_orthonormal_basis_warns(self):
        B = np.eye(4, 2) * 1.1
        with pytest.warns(NumericDegenerate):
            manual_tour(B, 3)

    def test_config_object(self, basis):
        # the largest first-column entry of a (6, 2) basis is at least 1/sqrt(6), so phi_start < 1.2
        cfg = TourConfig(phi_max=1.2, policy=FixedFrameCount(n_slides=10))
        tour = manual_tour(basis, manip_var_of(basis), cfg)
        assert len(tour) == 10
        assert tour.phis.max() == pytest.approx(1.2)

    def test_frames_are_read_only(self, basis):
        tour = manual_tour(basis, 1)
        assert not tour.frames.flags.writeable
        arr = tour.to_array()
        arr[0, 0, 0] = 99.0
        assert tour.frames[0, 0, 0] != 99.0

    def test_to_text(self, labeled_basis):
        text = manual_tour(labeled_basis, "head", policy=FixedFrameCount(n_slides=20)).to_text()
        assert "Frames: 20" in text
        assert "Manip var: 3 (head)" in text


class TestRotationDirection:
    """The manipulated variable moves towards the plane on the phi_min leg, whatever its sign."""

    CASES = [
        ("horizontal", None, 0.5, 0.1),
        ("horizontal", None, -0.5, 0.1),
        ("vertical", None, 0.1, 0.5),
        ("vertical", None, 0.1, -0.5),
        (None, np.pi, 0.5, 0.1),
        (None, 0.3, -0.5, -0.1),
    ]

    @pytest.mark.parametrize("policy", [FixedFrameCount(n_slides=24), FixedAngleStep(angle=0.1)])
    @pytest.mark.parametrize("manip_type, theta, b1, b2", CASES)
    def test_in_plane_contribution_grows_towards_phi_min(self, manip_type, theta, b1, b2, policy):
        k = 3
        B = basis_with_row(5, k, b1, b2)
        tour = manual_tour(B, k, manip_type=manip_type, theta=theta, policy=policy)

        i_min = int(np.argmin(tour.phis))
        norms = np.array([in_plane_norm(f, k) for f in tour.frames[: i_min + 1]])

        assert norms[0] == pytest.approx(np.hypot(b1, b2))
        assert np.all(np.diff(norms) >= -1e-12)
        assert norms[-1] > norms[0] + 0.3
        assert np.allclose(tour[-1], B, atol=1e-10)

    def test_helper_basis_is_orthonormal(self):
        B = basis_with_row(5, 3, -0.5, 0.1)
        assert np.allclose(B.T @ B, np.eye(2))
        assert np.allclose(B[2], [-0.5, 0.1])


class TestRadialTour:
    """Angle-step variant."""

    def test_round_trip_and_step_size(self, basis):
        tour = radial_tour(basis, 4, angle=0.1)

        assert np.allclose(tour[0], basis, atol=1e-10)
        assert np.allclose(tour[-1], basis, atol=1e-10)
        assert np.max(np.abs(np.diff(tour.phis))) <= 0.1 + 1e-12

    def test_frame_count_follows_leg_lengths(self, basis):
        phi_s = phi_start_of(basis, 4)
        tour = radial_tour(basis, 4, phi_min=0.0, phi_max=np.pi / 2, angle=0.05)

        total = phi_s + np.pi / 2 + (np.pi / 2 - phi_s)
        assert len(tour) >= int(np.ceil(total / 0.05))
        assert len(tour) <= int(np.ceil(total / 0.05)) + 3

    def test_explicit_theta(self, basis):
        assert radial_tour(basis, 4, theta=0.0).theta == 0.0


class TestSweepTour:
    """Absolute sweep of the rotation angle."""

    def test_full_turn_starts_and_ends_at_basis(self, basis):
        tour = sweep_tour(basis, 2, n_slides=15)

        assert len(tour) == 15
        assert np.allclose(tour.phis, np.linspace(0, 2 * np.pi, 15))
        assert np.allclose(tour[0], basis, atol=1e-10)
        assert np.allclose(tour[-1], basis, atol=1e-10)

    def test_half_turn_moves_basis(self, basis):
        tour = sweep_tour(basis, 2, phi_from=0.0, phi_to=np.pi, n_slides=5)
        assert not np.allclose(tour[-1], basis)

    def test_invalid_n_slides(self, basis):
        with pytest.raises(InvalidArgument, match="n_slides"):
            sweep_tour(basis, 2, n_slides=0)

    def test_labels_are_carried(self, labeled_basis):
        tour = sweep_tour(labeled_basis, "tars2")
        assert tour.manip_var == 2
        assert tour.labels == tuple(labeled_basis.index)


def test_dataframe_and_array_bases_agree(basis):
    df = pd.DataFrame(basis, index=[f"v{i}" for i in range(6)])
    assert np.allclose(manual_tour(df, "v2").frames, manual_tour(basis, 3).frames)
