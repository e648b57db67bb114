from vigilante_cables.analysis.classifier import (
    ClassifierConfig,
    classify_warning,
    has_ship_name,
    is_cable_related,
    is_fault,
    is_on_station,
)


def test_is_cable_related_keywords():
    assert is_cable_related("SUBMARINE CABLE repair in progress")
    assert is_cable_related("CABLESHIP CS Reliance on station")
    assert is_cable_related("cable laying operations")
    assert is_cable_related("fiber optic maintenance")
    assert is_cable_related("TELECOMMUNICATIONS CABLE route")


def test_is_cable_related_rejects_other_text():
    assert not is_cable_related("vessel traffic in the area")
    assert not is_cable_related("naval exercise commenced")
    assert not is_cable_related("pipeline inspection")
    assert not is_cable_related("")


def test_fault_and_on_station_patterns():
    assert is_fault("CABLE DAMAGE confirmed")
    assert is_fault("reported outage")
    assert not is_fault("routine maintenance")
    assert is_on_station("vessel ON STATION")
    assert is_on_station("repairing segment")
    assert not is_on_station("enroute to area")


def test_has_ship_name():
    assert has_ship_name("CABLESHIP RENE DESCARTES in area")
    assert has_ship_name("CABLE SHIP LEON THEVENIN")
    assert has_ship_name("M/V ILE DE BATZ")
    assert not has_ship_name("SUBMARINE CABLE FAULT on MAREA")


def test_classify_warning_combined():
    klass = classify_warning("CABLESHIP CS RELIANCE CABLE operations. 43-16N 002-56W. ON STATION.")
    assert klass.cable_related
    assert klass.repair_ship
    assert klass.on_station
    assert not klass.fault


def test_extended_config_adds_keywords():
    config = ClassifierConfig.extended(keywords=["umbilical"])
    assert is_cable_related("UMBILICAL works", config)
    assert not is_cable_related("UMBILICAL works")
    # las palabras clave por defecto siguen activas
    assert is_cable_related("submarine cable", config)
