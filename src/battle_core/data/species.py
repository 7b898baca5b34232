from src.battle_core.enums import Species, Type, GrowthRate
from src.battle_core.errors import UnknownSpeciesError
from src.battle_core.schema.species_info import SpeciesInfo

SPECIES_INFOS: dict[Species, SpeciesInfo] = {
    Species.BULBASAUR: SpeciesInfo(
        speciesId=Species.BULBASAUR,
        name="Bulbasaur",
        baseStats=[45, 49, 49, 65, 65, 45],
        types=[Type.GRASS, Type.POISON],
        growthRate=GrowthRate.MEDIUM_SLOW,
        baseExp=64,
        malePercent=7,
    ),
    Species.CHARMANDER: SpeciesInfo(
        speciesId=Species.CHARMANDER,
        name="Charmander",
        baseStats=[39, 52, 43, 60, 50, 65],
        types=[Type.FIRE],
        growthRate=GrowthRate.MEDIUM_SLOW,
        baseExp=62,
        malePercent=7,
    ),
    Species.SQUIRTLE: SpeciesInfo(
        speciesId=Species.SQUIRTLE,
        name="Squirtle",
        baseStats=[44, 48, 65, 50, 64, 43],
        types=[Type.WATER],
        growthRate=GrowthRate.MEDIUM_SLOW,
        baseExp=63,
        malePercent=7,
    ),
    Species.CATERPIE: SpeciesInfo(
        speciesId=Species.CATERPIE,
        name="Caterpie",
        baseStats=[45, 30, 35, 20, 20, 45],
        types=[Type.BUG],
        growthRate=GrowthRate.MEDIUM_FAST,
        baseExp=39,
        malePercent=4,
    ),
    Species.PIDGEY: SpeciesInfo(
        speciesId=Species.PIDGEY,
        name="Pidgey",
        baseStats=[40, 45, 40, 35, 35, 56],
        types=[Type.NORMAL, Type.FLYING],
        growthRate=GrowthRate.MEDIUM_SLOW,
        baseExp=50,
        malePercent=4,
    ),
    Species.RATTATA: SpeciesInfo(
        speciesId=Species.RATTATA,
        name="Rattata",
        baseStats=[30, 56, 35, 25, 35, 72],
        types=[Type.NORMAL],
        growthRate=GrowthRate.MEDIUM_FAST,
        baseExp=51,
        malePercent=4,
        genderDiffs=True,
    ),
    Species.PIKACHU: SpeciesInfo(
        speciesId=Species.PIKACHU,
        name="Pikachu",
        baseStats=[35, 55, 40, 50, 50, 90],
        types=[Type.ELECTRIC],
        growthRate=GrowthRate.MEDIUM_FAST,
        baseExp=112,
        malePercent=4,
        genderDiffs=True,
    ),
    Species.CLEFAIRY: SpeciesInfo(
        speciesId=Species.CLEFAIRY,
        name="Clefairy",
        baseStats=[70, 45, 48, 60, 65, 35],
        types=[Type.FAIRY],
        growthRate=GrowthRate.FAST,
        baseExp=113,
        malePercent=2,
    ),
    Species.GEODUDE: SpeciesInfo(
        speciesId=Species.GEODUDE,
        name="Geodude",
        baseStats=[40, 80, 100, 30, 30, 20],
        types=[Type.ROCK, Type.GROUND],
        growthRate=GrowthRate.MEDIUM_SLOW,
        baseExp=60,
        malePercent=4,
        genderDiffs=True,
    ),
    Species.MAGNEMITE: SpeciesInfo(
        speciesId=Species.MAGNEMITE,
        name="Magnemite",
        baseStats=[25, 35, 70, 95, 55, 45],
        types=[Type.ELECTRIC, Type.STEEL],
        growthRate=GrowthRate.MEDIUM_FAST,
        baseExp=65,
        malePercent=None,
    ),
    Species.GASTLY: SpeciesInfo(
        speciesId=Species.GASTLY,
        name="Gastly",
        baseStats=[30, 35, 30, 100, 35, 80],
        types=[Type.GHOST, Type.POISON],
        growthRate=GrowthRate.MEDIUM_SLOW,
        baseExp=62,
        malePercent=4,
    ),
    Species.DITTO: SpeciesInfo(
        speciesId=Species.DITTO,
        name="Ditto",
        baseStats=[48, 48, 48, 48, 48, 48],
        types=[Type.NORMAL],
        growthRate=GrowthRate.MEDIUM_FAST,
        baseExp=101,
        malePercent=None,
    ),
}


def get_species_info(species: Species) -> SpeciesInfo:
    try:
        return SPECIES_INFOS[species]
    except KeyError:
        raise UnknownSpeciesError(species) from None
