"""
Integration tests for basic PyMisrHR workflows.

These tests verify that the resampling, metadata and identifier components
work together the way the MISR-HR pipeline chains them.
"""
import pytest
import numpy as np


class TestChannelHarmonisation:
    """Bring every channel of a Global Mode block onto the 275 m grid."""

    @pytest.mark.integration
    @pytest.mark.slow
    def test_full_block_upsample_reduced_channels(self):
        import pymisrhr as pmh

        rng = np.random.default_rng(11)
        harmonised = {}
        for camera, band in pmh.instrument.channels("GM"):
            shape = pmh.instrument.native_shape(camera, band, "GM")
            grid = rng.uniform(0.0, 300.0, shape).astype(np.float32)
            if pmh.instrument.needs_upsampling(camera, band, "GM"):
                grid = pmh.rastermanip.upsample(grid)
            harmonised[(camera, band)] = grid

        assert len(harmonised) == 36
        assert all(g.shape == (512, 2048) for g in harmonised.values())

    @pytest.mark.integration
    @pytest.mark.slow
    def test_full_block_downsample_then_upsample_rdqi(self):
        """Upsampling the downsampled RDQI never improves quality."""
        import pymisrhr as pmh

        rng = np.random.default_rng(5)
        hr = rng.integers(0, 4, (512, 2048), dtype=np.uint8)
        back = pmh.rastermanip.upsample(pmh.rastermanip.downsample(hr, "RDQI"))
        assert np.all(back >= hr)

    @pytest.mark.integration
    @pytest.mark.slow
    def test_full_block_scaled_radiance_vs_unpacked(self):
        """Downsampled packed radiances agree with the unpacked, averaged ones."""
        import pymisrhr as pmh
        from pymisrhr.rastermanip import pack_scaled_radiance, unpack_scaled_radiance

        rng = np.random.default_rng(9)
        radiance = rng.integers(1, 16000, (512, 2048), dtype=np.uint16)
        flag = rng.integers(0, 4, (512, 2048), dtype=np.uint16)
        hr = pack_scaled_radiance(radiance, flag).astype(np.uint16)

        lr = pmh.rastermanip.downsample(hr, "ScaledRadianceWithFlag")
        lr_rad, lr_flag = unpack_scaled_radiance(lr)

        windows = radiance.astype(np.float64).reshape(128, 4, 512, 4).mean(axis=(1, 3))
        np.testing.assert_array_equal(lr_rad, np.floor(windows + 0.5).astype(np.uint16))
        np.testing.assert_array_equal(lr_flag, flag.reshape(128, 4, 512, 4).max(axis=(1, 3)))


class TestProductNaming:

    @pytest.mark.integration
    def test_parse_and_format_roundtrip(self):
        import pymisrhr as pmh

        info = pmh.filenames.parse_filename("MISR_HR_RDQI_P040_O012345_B066_CA.nc")
        ids = pmh.identifiers
        assert ids.path2str(info.path) == "P040"
        assert ids.orbit2str(info.orbit) == "O012345"
        assert ids.block2str(info.block) == "B066"
        assert pmh.instrument.channel_index(info.camera, "Red") == 7 * 4 + 2
