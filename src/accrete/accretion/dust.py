from dataclasses import dataclass

import numpy as np

from accrete.util.misc import dust_density, effect_limit_scalar, gas_mass_density


@dataclass
class DustBand:
    """
    An annulus of the disc with flags for the material left in it
    """

    inner_edge: float
    outer_edge: float
    dust_present: bool = True
    gas_present: bool = True

    @property
    def flags(self):
        return (self.dust_present, self.gas_present)

    def overlaps(self, inner, outer):
        return not (self.outer_edge <= inner or self.inner_edge >= outer)

    def describe(self):
        if self.dust_present and self.gas_present:
            kind = "dust and gas"
        elif self.dust_present:
            kind = "dust"
        elif self.gas_present:
            kind = "gas"
        else:
            kind = "empty"
        return f"{self.inner_edge:8.4f} - {self.outer_edge:8.4f} AU: {kind}"


class DustField:
    """
    The protoplanetary disc as an ordered list of non-overlapping DustBands.
    Adjacent bands never share the same flags.

    Args:
        inner_edge (float):
            Inner edge of the dusty disc in AU
        outer_edge (float):
            Outer edge of the dusty disc in AU
        protoplanet_zone (tuple):
            (inner, outer) in AU, region checked for remaining dust
        stellar_mass (float):
            Stellar mass in solar masses
        density_constant (float):
            Dust density at the star, before the radial falloff
    """

    def __init__(
        self, inner_edge, outer_edge, protoplanet_zone, stellar_mass, density_constant
    ):
        self.bands = [DustBand(float(inner_edge), float(outer_edge), True, True)]
        self.protoplanet_zone = (float(protoplanet_zone[0]), float(protoplanet_zone[1]))
        self.stellar_mass = float(stellar_mass)
        self.density_constant = float(density_constant)
        self.dust_remains = True
        self._update_dust_remains()

    @classmethod
    def from_bands(cls, bands, protoplanet_zone, stellar_mass, density_constant):
        """
        Build a field from an explicit band layout

        Args:
            bands (list):
                DustBands or (inner, outer, dust_present, gas_present) tuples,
                sorted and non-overlapping
        """
        bands = [
            band if isinstance(band, DustBand) else DustBand(*band) for band in bands
        ]
        if not bands:
            raise ValueError("A dust field needs at least one band")
        for band in bands:
            if band.outer_edge < band.inner_edge:
                raise ValueError(f"Band has negative width: {band}")
        for prev, band in zip(bands[:-1], bands[1:]):
            if band.inner_edge < prev.outer_edge:
                raise ValueError(f"Bands are unsorted or overlapping: {prev}, {band}")
        field = cls(
            bands[0].inner_edge,
            bands[-1].outer_edge,
            protoplanet_zone,
            stellar_mass,
            density_constant,
        )
        field.bands = field._merge(bands)
        field._update_dust_remains()
        return field

    def __repr__(self):
        return f"{type(self).__name__} object\n" + "\n".join(self.describe())

    def __len__(self):
        return len(self.bands)

    def describe(self):
        return [band.describe() for band in self.bands]

    def available(self, protoplanet):
        """
        Whether any dust is left within the protoplanet's reach
        """
        inner = protoplanet.effect_limit_inner
        outer = protoplanet.effect_limit_outer
        return any(
            band.dust_present and band.overlaps(inner, outer) for band in self.bands
        )

    def collect(self, protoplanet, last_mass):
        """
        Mass a protoplanet of mass last_mass would sweep from the bands inside
        its current effect limits. The field itself is not changed.

        Args:
            protoplanet (Protoplanet):
                Body doing the sweeping, with its effect limits set
            last_mass (float):
                Mass used for the gas ratio and the swept area, solar masses
        Returns:
            mass (float):
                Total swept mass in solar masses
            dust_mass (float):
                Dust part of the swept mass
            gas_mass (float):
                Gas part of the swept mass
        """
        r_inner = protoplanet.effect_limit_inner
        r_outer = protoplanet.effect_limit_outer
        bandwidth = r_outer - r_inner
        if bandwidth <= 0:
            return 0.0, 0.0, 0.0

        rho = dust_density(self.density_constant, self.stellar_mass, protoplanet.sma)
        scalar = effect_limit_scalar(last_mass)
        critical_mass = protoplanet.critical_mass
        e = protoplanet.eccentricity

        dust_mass = 0.0
        gas_mass = 0.0
        for band in self.bands:
            if not band.overlaps(r_inner, r_outer) or not band.dust_present:
                continue
            if last_mass < critical_mass or not band.gas_present:
                mass_density = rho
            else:
                mass_density = gas_mass_density(rho, critical_mass, last_mass)
            gas_density = max(0.0, mass_density - rho)

            outer_excess = max(0.0, r_outer - band.outer_edge)
            inner_excess = max(0.0, band.inner_edge - r_inner)
            width = bandwidth - outer_excess - inner_excess
            area = (
                4.0
                * np.pi
                * protoplanet.sma**2
                * scalar
                * (1.0 - e * (outer_excess - inner_excess) / bandwidth)
            )
            volume = area * width

            dust_mass += max(0.0, volume * rho)
            gas_mass += max(0.0, volume * gas_density)

        return float(dust_mass + gas_mass), float(dust_mass), float(gas_mass)

    def update(self, protoplanet, gas_retained):
        """
        Clear the dust (and the gas unless gas_retained) inside the
        protoplanet's effect limits, splitting bands that straddle a limit.
        Recomputes dust_remains.
        """
        inner = protoplanet.effect_limit_inner
        outer = protoplanet.effect_limit_outer
        bands = []
        for band in self.bands:
            if not band.overlaps(inner, outer):
                bands.append(band)
                continue
            if band.inner_edge < inner:
                bands.append(DustBand(band.inner_edge, inner, *band.flags))
            bands.append(
                DustBand(
                    max(band.inner_edge, inner),
                    min(band.outer_edge, outer),
                    False,
                    band.gas_present and gas_retained,
                )
            )
            if band.outer_edge > outer:
                bands.append(DustBand(outer, band.outer_edge, *band.flags))
        self.bands = self._merge(bands)
        self._update_dust_remains()

    def _merge(self, bands):
        merged = []
        for band in bands:
            if band.outer_edge <= band.inner_edge and len(bands) > 1:
                continue
            if (
                merged
                and merged[-1].flags == band.flags
                and merged[-1].outer_edge == band.inner_edge
            ):
                merged[-1] = DustBand(
                    merged[-1].inner_edge, band.outer_edge, *band.flags
                )
            else:
                merged.append(DustBand(band.inner_edge, band.outer_edge, *band.flags))
        return merged

    def _update_dust_remains(self):
        pz_inner, pz_outer = self.protoplanet_zone
        self.dust_remains = any(
            band.dust_present
            and band.outer_edge >= pz_inner
            and band.inner_edge <= pz_outer
            for band in self.bands
        )
